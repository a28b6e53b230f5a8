from fractions import Fraction as PyFraction

from zfrac import Fraction, gcd

# (numerator, denominator) pairs, denominators non-zero
SAMPLE_PAIRS = [
    (0, 1),
    (1, 2),
    (-1, 2),
    (2, 3),
    (-7, 3),
    (5, 1),
    (-4, 1),
    (9, 14),
    (-15, 8),
    (22, 7),
    (1, 1000),
    (10**20 + 1, 3 * 10**19),
]


def sample_fractions() -> list[Fraction]:
    return [Fraction(n, d) for n, d in SAMPLE_PAIRS]


def to_python_fraction(f: Fraction) -> PyFraction:
    return PyFraction(int(f.num), int(f.den))


def assert_canonical(f: Fraction):
    assert f.den >= 0
    assert gcd(f.num, f.den) in (0, 1)


def assert_pair(f: Fraction, num: int, den: int):
    assert_canonical(f)
    assert (f.num, f.den) == (num, den)
