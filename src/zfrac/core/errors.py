from __future__ import annotations


class IndeterminateFractionError(ArithmeticError):
    """Raised when the indeterminate (0/0) pole is used as an operand while strict mode is enabled."""

    def __init__(self, operation: str):
        super().__init__(
            f"Indeterminate fraction (0/0) used as operand of '{operation}'. "
            "This value results from e.g. adding opposite infinities and is not a valid rational. "
            "Set zfrac.core.flags.STRICT_INDETERMINATE = False to propagate it instead."
        )
        self.operation = operation
