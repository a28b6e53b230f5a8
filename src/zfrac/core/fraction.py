from __future__ import annotations

import math
from numbers import Integral
from typing import Any, Generic

from zfrac.core.constants import ONE_LITERAL, ZERO_LITERAL
from zfrac.core.integers import absolute, cross_product, like, reduce_common, sign_normalized
from zfrac.core.typing import FractionKind, Z
from zfrac.core.utils import check_determinate


def is_operand(x: Any) -> bool:
    return isinstance(x, Fraction | Integral)


class Fraction(Generic[Z]):
    """
    Exact rational number num/den over an integer type Z.

    Every instance is kept in canonical form: den >= 0 and gcd(num, den) is 1. Besides the finite
    values there are two special encodings, both with den == 0:

    - (1/0) and (-1/0) represent positive and negative infinity. Any (n/0) with n != 0 normalizes
      to (sign(n)/0).
    - (0/0) is indeterminate. It results from e.g. adding opposite infinities or multiplying
      infinity with zero and is not a valid rational, see ``kind`` and ``zfrac.core.flags``.

    Z can be a Python int, a numpy integer scalar or any other integral type supporting ordering and
    ring operations. Arithmetic is organized to cancel common factors before multiplying, which keeps
    intermediate values small for big integers and delays overflow for fixed-width integers.
    """

    __slots__ = ("_num", "_den")

    # numpy scalars must defer to our reflected operators instead of converting us to an array
    __array_ufunc__ = None

    _num: Z
    _den: Z

    def __new__(cls, num: Z | None = None, den: Z | None = None) -> Fraction[Z]:
        if num is None:
            if den is not None:
                raise TypeError("Cannot create Fraction from a denominator without numerator")
            return cls._raw(ZERO_LITERAL, ONE_LITERAL)
        num = _as_integer(num)
        if den is None:
            return cls._raw(num, like(num, ONE_LITERAL))
        den = _as_integer(den)
        num, den = sign_normalized(num, den)
        num, den, _ = reduce_common(num, den)
        return cls._raw(num, den)

    @classmethod
    def _raw(cls, num: Z, den: Z) -> Fraction[Z]:
        # no normalization, callers guarantee canonical form
        self = object.__new__(cls)
        self._num = num
        self._den = den
        return self

    @property
    def num(self) -> Z:
        return self._num

    @property
    def den(self) -> Z:
        return self._den

    @property
    def numerator(self) -> Z:
        return self._num

    @property
    def denominator(self) -> Z:
        return self._den

    @property
    def kind(self) -> FractionKind:
        if self._den != 0:
            return FractionKind.VALUE
        if self._num == 0:
            return FractionKind.INDETERMINATE
        return FractionKind.INFINITY

    @property
    def is_finite(self) -> bool:
        return bool(self._den != 0)

    @property
    def is_infinite(self) -> bool:
        return self.kind is FractionKind.INFINITY

    @property
    def is_indeterminate(self) -> bool:
        return self.kind is FractionKind.INDETERMINATE

    @property
    def sign(self) -> int:
        if self._num > 0:
            return 1
        if self._num < 0:
            return -1
        return 0

    def value(self) -> float:
        if self._den == 0:
            if self._num == 0:
                return math.nan
            return math.copysign(math.inf, self._num)
        return int(self._num) / int(self._den)

    def cross(self, other: Fraction[Z]) -> Z:
        """Cross product self.num * other.den - self.den * other.num"""
        return cross_product(self._num, self._den, other._num, other._den)

    def reciprocal(self) -> Fraction[Z]:
        from zfrac.functional.arithmetic import reciprocal

        return reciprocal(self)

    def __float__(self) -> float:
        return self.value()

    def __str__(self) -> str:
        return f"({self._num}/{self._den})"

    def __repr__(self) -> str:
        return f"Fraction({self._num!r}, {self._den!r})"

    def __hash__(self) -> int:
        # integral values hash like the integer they compare equal to
        if self._den == 1:
            return hash(self._num)
        return hash((self._num, self._den))

    def __bool__(self) -> bool:
        if not check_determinate("bool", self):
            return True
        return bool(self._num != 0)

    def __reduce__(self):
        # canonical pairs are fixed points of the normalizing constructor
        return (type(self), (self._num, self._den))

    def __copy__(self) -> Fraction[Z]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Fraction[Z]:
        return self

    def __neg__(self) -> Fraction[Z]:
        from zfrac.functional.arithmetic import negate

        return negate(self)

    def __pos__(self) -> Fraction[Z]:
        return self

    def __abs__(self) -> Fraction[Z]:
        check_determinate("abs", self)
        return type(self)._raw(absolute(self._num), self._den)

    def __pow__(self, exponent: int) -> Fraction[Z]:
        if not isinstance(exponent, Integral):
            return NotImplemented
        from zfrac.functional.arithmetic import power

        return power(self, exponent)

    def __mul__(self, other: Fraction[Z] | Z) -> Fraction[Z]:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.arithmetic import multiply

        return multiply(self, other)

    def __rmul__(self, other: Z) -> Fraction[Z]:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.arithmetic import multiply

        return multiply(other, self)

    def __imul__(self, other: Fraction[Z] | Z) -> Fraction[Z]:
        return self.__mul__(other)

    def __truediv__(self, other: Fraction[Z] | Z) -> Fraction[Z]:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.arithmetic import divide

        return divide(self, other)

    def __rtruediv__(self, other: Z) -> Fraction[Z]:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.arithmetic import divide

        return divide(other, self)

    def __itruediv__(self, other: Fraction[Z] | Z) -> Fraction[Z]:
        return self.__truediv__(other)

    def __add__(self, other: Fraction[Z] | Z) -> Fraction[Z]:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.arithmetic import add

        return add(self, other)

    def __radd__(self, other: Z) -> Fraction[Z]:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.arithmetic import add

        return add(other, self)

    def __iadd__(self, other: Fraction[Z] | Z) -> Fraction[Z]:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.arithmetic import iadd

        return iadd(self, other)

    def __sub__(self, other: Fraction[Z] | Z) -> Fraction[Z]:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.arithmetic import subtract

        return subtract(self, other)

    def __rsub__(self, other: Z) -> Fraction[Z]:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.arithmetic import subtract

        return subtract(other, self)

    def __isub__(self, other: Fraction[Z] | Z) -> Fraction[Z]:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.arithmetic import isub

        return isub(self, other)

    def __eq__(self, other: object) -> bool:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.comparison import eq

        return eq(self, other)

    def __ne__(self, other: object) -> bool:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.comparison import ne

        return ne(self, other)

    def __lt__(self, other: Fraction[Z] | Z) -> bool:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.comparison import lt

        return lt(self, other)

    def __le__(self, other: Fraction[Z] | Z) -> bool:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.comparison import le

        return le(self, other)

    def __gt__(self, other: Fraction[Z] | Z) -> bool:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.comparison import gt

        return gt(self, other)

    def __ge__(self, other: Fraction[Z] | Z) -> bool:
        if not is_operand(other):
            return NotImplemented
        from zfrac.functional.comparison import ge

        return ge(self, other)


def _as_integer(x: Any) -> Any:
    if isinstance(x, bool):
        return int(x)
    if not isinstance(x, Integral):
        raise TypeError(f"Fraction numerator and denominator must be integers, got {type(x).__name__}")
    return x
