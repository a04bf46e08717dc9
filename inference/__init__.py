"""Cell classification and column type resolution."""

from .classifier import (
    NULL_STRING_VALUES,
    RECOVERABLE_CELL_ERRORS,
    classify_cell,
    classify_value,
    parse_iso_datetime,
)
from .resolver import (
    FLOAT_TYPES,
    INT_TYPES,
    STRING_TYPES,
    resolve_column,
    resolve_types,
)

__all__ = [
    "NULL_STRING_VALUES",
    "RECOVERABLE_CELL_ERRORS",
    "classify_cell",
    "classify_value",
    "parse_iso_datetime",
    "INT_TYPES",
    "FLOAT_TYPES",
    "STRING_TYPES",
    "resolve_column",
    "resolve_types",
]
