from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, TypeVar, Union, runtime_checkable

import numpy as np


@runtime_checkable
class IntegerLike(Protocol):
    """Capabilities a numerator/denominator type must provide.

    Total ordering, equality, ring operations, floor division and remainder,
    and unary negation. Construction from the literals 0 and 1 is done by
    calling the type itself, e.g. ``type(z)(1)``.
    """

    def __lt__(self, other: Any, /) -> Any: ...

    def __eq__(self, other: Any, /) -> Any: ...

    def __add__(self, other: Any, /) -> Any: ...

    def __sub__(self, other: Any, /) -> Any: ...

    def __mul__(self, other: Any, /) -> Any: ...

    def __floordiv__(self, other: Any, /) -> Any: ...

    def __mod__(self, other: Any, /) -> Any: ...

    def __neg__(self) -> Any: ...


Z = TypeVar("Z", bound=IntegerLike)

# numpy scalar integers, the fixed-width flavour of Z
FixedWidthInteger = Union[
    np.signedinteger,
    np.unsignedinteger,
]

# Unsigned types for which the absolute value is the identity
UnsignedInteger = Union[
    np.unsignedinteger,
]

AnyInteger = Union[
    int,
    np.signedinteger,
    np.unsignedinteger,
]


# Classification of a canonical fraction. Replaces the implicit (n, 0) / (0, 0) encodings
# with an explicit tag that callers can branch on.
class FractionKind(Enum):
    VALUE = "value"
    INFINITY = "infinity"
    INDETERMINATE = "indeterminate"
