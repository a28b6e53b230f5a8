from __future__ import annotations

import logging
from typing import Any

from zfrac.core import flags
from zfrac.core.errors import IndeterminateFractionError

logger = logging.getLogger(__name__)


def is_indeterminate(x: Any) -> bool:
    return bool(getattr(x, "is_indeterminate", False))


def check_determinate(operation: str, *operands: Any) -> bool:
    """
    Guards an operation against indeterminate (0/0) operands.

    Args:
        operation (str): name of the operation, used in error and log messages
        *operands (Any): operands of the operation. Integers are always determinate.

    Raises:
        IndeterminateFractionError: if an operand is indeterminate and strict mode is enabled.

    Returns:
        bool: True if all operands are determinate. False if an operand is indeterminate and strict
        mode is disabled, in which case the caller has to propagate the indeterminate value.
    """
    if not any(is_indeterminate(x) for x in operands):
        return True
    if flags.STRICT_INDETERMINATE:
        raise IndeterminateFractionError(operation)
    logger.warning("Propagating indeterminate fraction through '%s'", operation)
    return False
