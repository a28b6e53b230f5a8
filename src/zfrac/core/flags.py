"""Global indeterminate policy. If True, consuming the (0/0) pole in arithmetic, comparisons or truth tests
raises IndeterminateFractionError. If False, the pole propagates like a float NaN.
Always read through the module (``flags.STRICT_INDETERMINATE``) so that the flag can be changed at runtime.
"""

STRICT_INDETERMINATE: bool = True
