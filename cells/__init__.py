"""Raw cell values and the sources that supply them."""

from .adapters import DataFrameCellSource, WorksheetCellSource, unnamed_column
from .source import CellSource, GridCellSource, check_bounds
from .values import (
    EMPTY,
    BoolCell,
    CellErrorType,
    CellValue,
    DateTimeCell,
    DateTimeIsoCell,
    DurationIsoCell,
    EmptyCell,
    ErrorCell,
    FloatCell,
    IntCell,
    StringCell,
    to_cell_value,
)

__all__ = [
    "CellSource",
    "GridCellSource",
    "DataFrameCellSource",
    "WorksheetCellSource",
    "check_bounds",
    "unnamed_column",
    "CellValue",
    "CellErrorType",
    "IntCell",
    "FloatCell",
    "StringCell",
    "BoolCell",
    "DateTimeCell",
    "DateTimeIsoCell",
    "DurationIsoCell",
    "ErrorCell",
    "EmptyCell",
    "EMPTY",
    "to_cell_value",
]
