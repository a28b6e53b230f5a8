# ruff: noqa: F811
from numbers import Integral

from plum import dispatch, overload

from zfrac.core.fraction import Fraction
from zfrac.core.integers import reduce_common, widened
from zfrac.core.utils import check_determinate

# All denominators are non-negative, so a / b < c / d can be decided by comparing a * d with b * c.
# Before multiplying, the numerators and the denominators are each divided by their common factor.
# This does not change the result but keeps the products small.


## Equality #################################
@overload
def eq(x: Fraction, y: Fraction) -> bool:
    if not check_determinate("eq", x, y):
        return False
    x_num, x_den, y_num, y_den = widened(x.num, x.den, y.num, y.den)
    if x_den == y_den:
        return bool(x_num == y_num)
    x_num, y_num, _ = reduce_common(x_num, y_num)
    x_den, y_den, _ = reduce_common(x_den, y_den)
    return bool(x_num * y_den == x_den * y_num)


@overload
def eq(x: Fraction, y: Integral) -> bool:
    if not check_determinate("eq", x):
        return False
    x_num, x_den, z = widened(x.num, x.den, y)
    if x_den == 1 or z == 0:
        return bool(x_num == z)
    # the integer takes the place of the second denominator
    x_num, z, _ = reduce_common(x_num, z)
    return bool(x_num == z * x_den)


@overload
def eq(x: Integral, y: Fraction) -> bool:
    return eq(y, x)


@dispatch
def eq(x, y):
    del x, y
    raise NotImplementedError()


## Less than ################################
@overload
def lt(x: Fraction, y: Fraction) -> bool:
    if not check_determinate("lt", x, y):
        return False
    x_num, x_den, y_num, y_den = widened(x.num, x.den, y.num, y.den)
    if x_den == y_den:
        return bool(x_num < y_num)
    x_num, y_num, _ = reduce_common(x_num, y_num)
    x_den, y_den, _ = reduce_common(x_den, y_den)
    return bool(x_num * y_den < x_den * y_num)


@overload
def lt(x: Fraction, y: Integral) -> bool:
    if not check_determinate("lt", x):
        return False
    x_num, x_den, z = widened(x.num, x.den, y)
    if x_den == 1 or z == 0:
        return bool(x_num < z)
    x_num, z, _ = reduce_common(x_num, z)
    return bool(x_num < z * x_den)


@overload
def lt(x: Integral, y: Fraction) -> bool:
    if not check_determinate("lt", y):
        return False
    z, y_num, y_den = widened(x, y.num, y.den)
    if y_den == 1 or z == 0:
        return bool(z < y_num)
    y_num, z, _ = reduce_common(y_num, z)
    return bool(z * y_den < y_num)


@dispatch
def lt(x, y):
    del x, y
    raise NotImplementedError()


## Derived comparisons ######################
def ne(x: Fraction | Integral, y: Fraction | Integral) -> bool:
    if not check_determinate("ne", x, y):
        return True
    return not eq(x, y)


def gt(x: Fraction | Integral, y: Fraction | Integral) -> bool:
    return lt(y, x)


def le(x: Fraction | Integral, y: Fraction | Integral) -> bool:
    if not check_determinate("le", x, y):
        return False
    return not lt(y, x)


def ge(x: Fraction | Integral, y: Fraction | Integral) -> bool:
    if not check_determinate("ge", x, y):
        return False
    return not lt(x, y)
