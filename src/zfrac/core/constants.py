"""The only integer literals a numerator/denominator type has to be constructible from."""

ZERO_LITERAL: int = 0
ONE_LITERAL: int = 1
