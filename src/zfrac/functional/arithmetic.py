# ruff: noqa: F811
import logging
from numbers import Integral

from plum import dispatch, overload

from zfrac.core.constants import ZERO_LITERAL
from zfrac.core.fraction import Fraction
from zfrac.core.integers import cross_product, gcd, like, reduce_common, sign_normalized
from zfrac.core.utils import check_determinate

logger = logging.getLogger(__name__)


def _indeterminate(x: Fraction) -> Fraction:
    zero = like(x.num, ZERO_LITERAL)
    return Fraction._raw(zero, zero)


def _finish(operation: str, result: Fraction) -> Fraction:
    if result.den == 0:
        logger.debug("'%s' produced %s (%s)", operation, result, result.kind.value)
    return result


def _product(x_num, x_den, y_num, y_den) -> Fraction:
    # cancel each numerator against the other denominator, the pairs (x_num, x_den) and
    # (y_num, y_den) are already coprime, so the products are canonical
    y_num, x_den, _ = reduce_common(y_num, x_den)
    x_num, y_den, _ = reduce_common(x_num, y_den)
    return Fraction._raw(x_num * y_num, x_den * y_den)


def _scaled(num, den, z) -> Fraction:
    z, den, _ = reduce_common(z, den)
    return Fraction._raw(num * z, den)


## Negation / Reciprocal ####################
def negate(x: Fraction) -> Fraction:
    if not check_determinate("negate", x):
        return x
    return Fraction._raw(-x.num, x.den)


def reciprocal(x: Fraction) -> Fraction:
    if not check_determinate("reciprocal", x):
        return x
    num, den = sign_normalized(x.den, x.num)
    return _finish("reciprocal", Fraction._raw(num, den))


## Multiplication ###########################
@overload
def multiply(x: Fraction, y: Fraction) -> Fraction:
    if not check_determinate("multiply", x, y):
        return _indeterminate(x)
    return _finish("multiply", _product(x.num, x.den, y.num, y.den))


@overload
def multiply(x: Fraction, y: Integral) -> Fraction:
    if not check_determinate("multiply", x):
        return _indeterminate(x)
    return _finish("multiply", _scaled(x.num, x.den, y))


@overload
def multiply(x: Integral, y: Fraction) -> Fraction:
    return multiply(y, x)


@dispatch
def multiply(x, y):
    del x, y
    raise NotImplementedError()


## Division #################################
@overload
def divide(x: Fraction, y: Fraction) -> Fraction:
    if not check_determinate("divide", x, y):
        return _indeterminate(x)
    # multiply with the reciprocal, whose sign has to move back into the numerator
    y_num, y_den = sign_normalized(y.den, y.num)
    return _finish("divide", _product(x.num, x.den, y_num, y_den))


@overload
def divide(x: Fraction, y: Integral) -> Fraction:
    if not check_determinate("divide", x):
        return _indeterminate(x)
    x_num, z = sign_normalized(x.num, y)
    x_num, z, _ = reduce_common(x_num, z)
    return _finish("divide", Fraction._raw(x_num, z * x.den))


@overload
def divide(x: Integral, y: Fraction) -> Fraction:
    if not check_determinate("divide", y):
        return _indeterminate(y)
    y_num, y_den = sign_normalized(y.den, y.num)
    return _finish("divide", _scaled(y_num, y_den, x))


@dispatch
def divide(x, y):
    del x, y
    raise NotImplementedError()


## Addition #################################
@overload
def add(x: Fraction, y: Fraction) -> Fraction:
    if not check_determinate("add", x, y):
        return _indeterminate(x)
    if x.den == y.den:
        # also covers two infinities, opposite signs yield the indeterminate (0/0)
        return _finish("add", Fraction(x.num + y.num, x.den))
    # expand both only up to the least common denominator
    common = gcd(x.den, y.den)
    x_factor = y.den // common
    y_factor = x.den // common
    return _finish("add", Fraction(x_factor * x.num + y_factor * y.num, x.den * x_factor))


@overload
def add(x: Fraction, y: Integral) -> Fraction:
    return isub(x, -y)


@overload
def add(x: Integral, y: Fraction) -> Fraction:
    return isub(y, -x)


@dispatch
def add(x, y):
    del x, y
    raise NotImplementedError()


## Subtraction ##############################
@overload
def subtract(x: Fraction, y: Fraction) -> Fraction:
    if not check_determinate("subtract", x, y):
        return _indeterminate(x)
    return add(x, negate(y))


@overload
def subtract(x: Fraction, y: Integral) -> Fraction:
    return isub(x, y)


@overload
def subtract(x: Integral, y: Fraction) -> Fraction:
    if not check_determinate("subtract", y):
        return _indeterminate(y)
    return add(negate(y), x)


@dispatch
def subtract(x, y):
    del x, y
    raise NotImplementedError()


## Accumulation (+= and -=) #################
@overload
def isub(x: Fraction, y: Fraction) -> Fraction:
    """
    Difference x - y computed with the factors shared by the operands split off first.

    With g_n = gcd(x.num, y.num) and g_d = gcd(x.den, y.den) the difference is
    g_n * cross(x / g, y / g) / (g_d * x.den / g_d * y.den / g_d). The cross product is only
    reduced against g_d before g_n is multiplied back in, which keeps all intermediate values
    close to the size of the result.

    Args:
        x (Fraction): minuend
        y (Fraction): subtrahend

    Returns:
        Fraction: canonical x - y
    """
    if not check_determinate("isub", x, y):
        return _indeterminate(x)
    if x.den == y.den:
        num, den, _ = reduce_common(x.num - y.num, x.den)
        return _finish("isub", Fraction._raw(num, den))
    x_num, y_num, num_common = reduce_common(x.num, y.num)
    x_den, y_den, den_common = reduce_common(x.den, y.den)
    diff = cross_product(x_num, x_den, y_num, y_den)
    diff, den_common, _ = reduce_common(diff, den_common)
    num, den, _ = reduce_common(diff * num_common, den_common * x_den * y_den)
    return _finish("isub", Fraction._raw(num, den))


@overload
def isub(x: Fraction, y: Integral) -> Fraction:
    if not check_determinate("isub", x):
        return _indeterminate(x)
    if x.den == 1:
        return Fraction._raw(x.num - y, x.den)
    # x.num / x.den - y = g * (x.num / g - (y / g) * x.den) / x.den with g = gcd(x.num, y)
    x_num, z, num_common = reduce_common(x.num, y)
    num, den, _ = reduce_common((x_num - z * x.den) * num_common, x.den)
    return _finish("isub", Fraction._raw(num, den))


@dispatch
def isub(x, y):
    del x, y
    raise NotImplementedError()


@overload
def iadd(x: Fraction, y: Fraction) -> Fraction:
    if not check_determinate("iadd", x, y):
        return _indeterminate(x)
    return isub(x, negate(y))


@overload
def iadd(x: Fraction, y: Integral) -> Fraction:
    return isub(x, -y)


@dispatch
def iadd(x, y):
    del x, y
    raise NotImplementedError()


## Power ####################################
def power(x: Fraction, exponent: int) -> Fraction:
    if not check_determinate("power", x):
        return x
    # numpy exponents would turn arbitrary precision numerators into fixed-width ones
    exponent = int(exponent)
    if exponent < 0:
        x = reciprocal(x)
        exponent = -exponent
    # powers of coprime integers stay coprime
    return _finish("power", Fraction._raw(x.num**exponent, x.den**exponent))
