from __future__ import annotations

import math
from typing import Any

from zfrac.core.constants import ZERO_LITERAL
from zfrac.core.typing import FixedWidthInteger, UnsignedInteger, Z


def like(z: Z, literal: int) -> Z:
    """Integer literal of the same type as z, e.g. np.int32(1) for z of type np.int32."""
    if isinstance(z, int):
        return literal  # ty:ignore[invalid-return-type]
    return type(z)(literal)


def absolute(a: Z) -> Z:
    if isinstance(a, UnsignedInteger):
        return a
    return -a if a < 0 else a


def gcd(m: Z, n: Z) -> Z:
    """
    Greatest common divisor, always non-negative.

    gcd(0, n) is |n| and in particular gcd(0, 0) is 0. Otherwise the Euclidean step
    gcd(m, n) = gcd(n, m mod n) is applied until the second argument vanishes. The step
    is run as a loop since big integers can need more steps than the recursion limit allows.

    Args:
        m (Z): first integer
        n (Z): second integer

    Returns:
        Z: greatest common divisor of m and n, of the same type as the inputs
    """
    if type(m) is int and type(n) is int:
        return math.gcd(m, n)  # ty:ignore[invalid-return-type]
    if m == 0:
        return absolute(n)
    while n != 0:
        m, n = n, m % n
    return absolute(m)


def lcm(m: Z, n: Z) -> Z:
    # zero short-circuit, there is no gcd to divide by if both are zero
    if m == 0 or n == 0:
        return like(m, ZERO_LITERAL)
    return (absolute(m) // gcd(m, n)) * absolute(n)


def sign_normalized(num: Z, den: Z) -> tuple[Z, Z]:
    """Moves the sign of the denominator to the numerator."""
    if den < 0:
        return -num, -den
    return num, den


def reduce_common(a: Z, b: Z) -> tuple[Z, Z, Z]:
    """
    Splits the common factor off a pair of integers.

    This is the building block of all fraction operations: applied to (num, den) it yields the
    canonical form, applied to the numerator of one fraction and the denominator of another it
    cancels factors before they are multiplied together. The common factor is returned as well,
    so that callers can multiply it back in later instead of recomputing it.

    Args:
        a (Z): first integer
        b (Z): second integer

    Returns:
        tuple[Z, Z, Z]: a // g, b // g and g = gcd(a, b). If g is 0 or 1, a and b are returned unchanged.
    """
    common = gcd(a, b)
    if common == 1 or common == 0:
        return a, b, common
    return a // common, b // common, common


def cross_product(a_num: Z, a_den: Z, b_num: Z, b_den: Z) -> Z:
    """a_num * b_den - a_den * b_num, the numerator of a - b over the denominator a_den * b_den."""
    return a_num * b_den - a_den * b_num


def widened(*values: Any) -> tuple[Any, ...]:
    """Converts all values to Python ints if fixed-width and Python integers are mixed.

    A Python int can exceed the range of the fixed-width type, so mixed operands are only
    compared exactly after widening. Values of a single integer family are returned as they are.
    """
    if any(isinstance(v, FixedWidthInteger) for v in values) and any(isinstance(v, int) for v in values):
        return tuple(int(v) for v in values)
    return values
