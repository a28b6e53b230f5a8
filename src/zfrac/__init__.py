from zfrac.core.errors import IndeterminateFractionError
from zfrac.core.fraction import Fraction
from zfrac.core.integers import absolute, gcd, lcm
from zfrac.core.typing import FractionKind, IntegerLike


__all__ = [
    "Fraction",
    "FractionKind",
    "IntegerLike",
    "IndeterminateFractionError",
    "absolute",
    "gcd",
    "lcm",
]
