"""Cell classifier.

Maps one raw cell reading onto a semantic type tag. Classification is
purely local to the cell: combining tags across a column is the
resolver's job.
"""

from datetime import datetime
from typing import AbstractSet, Optional

from cells.source import CellSource
from cells.values import (
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
)
from core.dtype import DType
from core.errors import UnsupportedCellError

# Exact, case-sensitive string literals read as a missing value
NULL_STRING_VALUES = frozenset(
    {
        "",
        "#N/A",
        "#N/A N/A",
        "#NA",
        "-1.#IND",
        "-1.#QNAN",
        "-NaN",
        "-nan",
        "1.#IND",
        "1.#QNAN",
        "<NA>",
        "N/A",
        "NA",
        "NULL",
        "NaN",
        "None",
        "n/a",
        "nan",
        "null",
    }
)

# Error codes that denote a legitimately missing value
RECOVERABLE_CELL_ERRORS = frozenset(
    {CellErrorType.NA, CellErrorType.VALUE, CellErrorType.NULL}
)

ISO_DATETIME_FORMATS = (
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S.%f",
)


def parse_iso_datetime(text: str) -> Optional[datetime]:
    """Parse ISO 8601 text as a naive datetime.

    A plain date (no time part) does not parse.

    Args:
        text: ISO 8601 text

    Returns:
        Parsed datetime, or None if text is not a datetime
    """
    for fmt in ISO_DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def classify_value(
    value: CellValue,
    recoverable_errors: AbstractSet = RECOVERABLE_CELL_ERRORS,
    row: Optional[int] = None,
    col: Optional[int] = None,
) -> DType:
    """Classify a single cell value.

    Args:
        value: Raw cell reading
        recoverable_errors: Error codes treated as null; any other code is fatal
        row: Row of the value, reported in errors
        col: Column of the value, reported in errors

    Returns:
        Semantic type of the cell

    Raises:
        UnsupportedCellError: If the cell carries a non-recoverable error code
    """
    if isinstance(value, IntCell):
        return DType.INT
    if isinstance(value, FloatCell):
        return DType.FLOAT
    if isinstance(value, StringCell):
        return DType.NULL if value.value in NULL_STRING_VALUES else DType.STRING
    if isinstance(value, BoolCell):
        return DType.BOOL
    if isinstance(value, DateTimeCell):
        return DType.DATETIME if value.is_datetime else DType.DURATION
    if isinstance(value, DateTimeIsoCell):
        # date-only text stays a date (date32), never a midnight datetime
        if parse_iso_datetime(value.text) is not None:
            return DType.DATETIME
        return DType.DATE
    if isinstance(value, DurationIsoCell):
        return DType.DURATION
    if isinstance(value, ErrorCell):
        if value.code in recoverable_errors:
            return DType.NULL
        raise UnsupportedCellError(value.code, row, col)
    if isinstance(value, EmptyCell):
        return DType.NULL
    raise TypeError(f"not a cell value: {value!r}")


def classify_cell(
    source: CellSource,
    row: int,
    col: int,
    recoverable_errors: AbstractSet = RECOVERABLE_CELL_ERRORS,
) -> DType:
    """Classify the cell at (row, col) of a cell source.

    Raises:
        CellOutOfRangeError: If the source has no value there
        UnsupportedCellError: If the cell carries a non-recoverable error code
    """
    return classify_value(source.get(row, col), recoverable_errors, row, col)
