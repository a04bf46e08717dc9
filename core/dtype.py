"""Semantic column types.

DType is the closed set of logical types a column can resolve to. Its
string values double as the user-facing override vocabulary, and each
member projects onto the physical arrow type the columnar materializer
allocates.
"""

from enum import Enum
from typing import Any

import pyarrow as pa

from core.errors import InvalidTypeNameError


class DType(str, Enum):
    """Semantic type of a column."""

    NULL = "null"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "boolean"
    DATETIME = "datetime"
    DATE = "date"
    DURATION = "duration"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: Any) -> "DType":
        """Parse a user-facing type string.

        Args:
            raw: Vocabulary string (or an existing DType)

        Returns:
            Matching DType member

        Raises:
            InvalidTypeNameError: If raw is not part of the vocabulary
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise InvalidTypeNameError(repr(raw))
        try:
            return cls(raw)
        except ValueError:
            raise InvalidTypeNameError(raw) from None

    @property
    def arrow_type(self) -> pa.DataType:
        """Physical columnar type for this semantic type."""
        return _ARROW_TYPES[self]

    @property
    def is_temporal(self) -> bool:
        return self in TEMPORAL_TYPES


TEMPORAL_TYPES = frozenset({DType.DATETIME, DType.DATE, DType.DURATION})

# date32 rather than date64: pyarrow consumers turn date64 into datetimes
_ARROW_TYPES = {
    DType.NULL: pa.null(),
    DType.INT: pa.int64(),
    DType.FLOAT: pa.float64(),
    DType.STRING: pa.utf8(),
    DType.BOOL: pa.bool_(),
    DType.DATETIME: pa.timestamp("ms"),
    DType.DATE: pa.date32(),
    DType.DURATION: pa.duration("ms"),
}
