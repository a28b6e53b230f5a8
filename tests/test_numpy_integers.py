import numpy as np

from zfrac import Fraction, IntegerLike
from zfrac.core.typing import AnyInteger, FixedWidthInteger, UnsignedInteger
from tests.utils import assert_pair


def test_construction_keeps_numpy_type():
    """Reduction does not leave the numpy integer type"""
    f = Fraction(np.int64(2), np.int64(4))
    assert_pair(f, 1, 2)
    assert isinstance(f.num, np.int64)
    assert isinstance(f.den, np.int64)
    g = Fraction(np.int32(3))
    assert isinstance(g.den, np.int32)
    assert g.den == 1


def test_unsigned_integers():
    """Unsigned integers as numerator and denominator type"""
    f = Fraction(np.uint32(6), np.uint32(4))
    assert_pair(f, 3, 2)
    assert isinstance(f.num, np.uint32)
    res = f * Fraction(np.uint32(2), np.uint32(9))
    assert_pair(res, 1, 3)
    assert_pair(Fraction(np.uint8(3), np.uint8(0)), 1, 0)


def test_cancellation_avoids_fixed_width_overflow():
    """Factors are cancelled before multiplying, so int8 products never exceed the result"""
    x = Fraction(np.int8(100), np.int8(7))
    y = Fraction(np.int8(7), np.int8(100))
    res = x * y
    assert_pair(res, 1, 1)
    assert isinstance(res.num, np.int8)
    res = x / x
    assert_pair(res, 1, 1)


def test_arithmetic_with_numpy_integers():
    """All operators on numpy based fractions"""
    x = Fraction(np.int64(1), np.int64(2))
    y = Fraction(np.int64(1), np.int64(3))
    assert_pair(x + y, 5, 6)
    assert_pair(x - y, 1, 6)
    assert_pair(x * y, 1, 6)
    assert_pair(x / y, 3, 2)
    assert_pair(x + 1, 3, 2)
    assert_pair(x - np.int64(1), -1, 2)
    assert_pair(-x, -1, 2)
    assert_pair(x**2, 1, 4)


def test_numpy_scalar_on_the_left():
    """numpy scalars defer to the reflected fraction operators"""
    f = Fraction(3, 4)
    res = np.int64(2) * f
    assert isinstance(res, Fraction)
    assert_pair(res, 3, 2)
    res = np.int64(1) - f
    assert isinstance(res, Fraction)
    assert_pair(res, 1, 4)
    assert np.int64(1) < Fraction(4, 3)
    assert np.int64(1) > f


def test_comparisons_return_python_bool():
    """Comparison results are plain bools, not numpy bools"""
    x = Fraction(np.int64(1), np.int64(3))
    y = Fraction(np.int64(1), np.int64(2))
    res = x < y
    assert res is True
    assert (x == y) is False
    assert (x == Fraction(1, 3)) is True
    assert (y > np.int64(0)) is True


def test_mixed_numpy_and_python_fractions():
    """Fractions over different integer types compare and combine"""
    x = Fraction(np.int64(2), np.int64(6))
    assert x == Fraction(1, 3)
    assert_pair(x + Fraction(1, 6), 1, 2)
    assert hash(Fraction(np.int64(3))) == hash(Fraction(3))


def test_conversion_and_rendering():
    """float and str of numpy based fractions"""
    f = Fraction(np.int64(1), np.int64(4))
    assert float(f) == 0.25
    assert str(f) == "(1/4)"


def test_integer_type_aliases():
    """numpy scalars are fixed-width, Python ints are not"""
    assert isinstance(np.int8(1), FixedWidthInteger)
    assert isinstance(np.uint64(1), FixedWidthInteger)
    assert isinstance(np.uint16(1), UnsignedInteger)
    assert not isinstance(np.int16(1), UnsignedInteger)
    assert not isinstance(1, FixedWidthInteger)
    assert isinstance(1, AnyInteger)
    assert isinstance(np.int32(1), AnyInteger)
    assert isinstance(np.int32(1), IntegerLike)


def test_compare_with_integers_beyond_fixed_width():
    """Python ints outside the numpy range are compared exactly"""
    x = Fraction(np.int64(1), np.int64(3))
    assert x < 10**30
    assert not x > 10**30
    assert x > -(10**30)
    assert x != 10**30
    assert 10**30 > x
    assert x < Fraction(10**30, 7)
    assert Fraction(-(10**30), 7) < x
    assert not x == Fraction(10**30 + 1, 3 * 10**30)
    assert Fraction(np.int64(5)) == Fraction(5 * 10**30, 10**30)
