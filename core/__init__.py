"""Core types shared by every layer of schema inference."""

from .dtype import TEMPORAL_TYPES, DType
from .errors import (
    CellOutOfRangeError,
    DatasetLoadError,
    IncompatibleColumnTypesError,
    InvalidParametersError,
    InvalidTypeNameError,
    OptionsValidationError,
    SheetSchemaError,
    UnsupportedCellError,
)

__all__ = [
    "DType",
    "TEMPORAL_TYPES",
    "SheetSchemaError",
    "CellOutOfRangeError",
    "UnsupportedCellError",
    "IncompatibleColumnTypesError",
    "InvalidTypeNameError",
    "InvalidParametersError",
    "DatasetLoadError",
    "OptionsValidationError",
]
