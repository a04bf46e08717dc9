"""Raw cell readings.

A CellValue is what a cell source hands back for one (row, col) pair
before any type inference happens. Values are produced on demand and
never stored by the inference layer.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Any, Union

import numpy as np
import pandas as pd


class CellErrorType(str, Enum):
    """Error literals a spreadsheet cell can carry."""

    DIV0 = "#DIV/0!"
    NA = "#N/A"
    NAME = "#NAME?"
    NULL = "#NULL!"
    NUM = "#NUM!"
    REF = "#REF!"
    VALUE = "#VALUE!"
    GETTING_DATA = "#DATA!"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntCell:
    value: int


@dataclass(frozen=True)
class FloatCell:
    value: float


@dataclass(frozen=True)
class StringCell:
    value: str


@dataclass(frozen=True)
class BoolCell:
    value: bool


@dataclass(frozen=True)
class DateTimeCell:
    """Native datetime encoding.

    The same physical encoding can hold a point in time or an elapsed
    interval; is_datetime is the source's own answer and is trusted.
    """

    value: Any
    is_datetime: bool = True


@dataclass(frozen=True)
class DateTimeIsoCell:
    """ISO 8601 text holding either a datetime or a plain date."""

    text: str


@dataclass(frozen=True)
class DurationIsoCell:
    """ISO 8601 text holding a duration."""

    text: str


@dataclass(frozen=True)
class ErrorCell:
    """Error marker; code is a CellErrorType or an unrecognised literal."""

    code: Union[CellErrorType, str]


@dataclass(frozen=True)
class EmptyCell:
    pass


EMPTY = EmptyCell()

CellValue = Union[
    IntCell,
    FloatCell,
    StringCell,
    BoolCell,
    DateTimeCell,
    DateTimeIsoCell,
    DurationIsoCell,
    ErrorCell,
    EmptyCell,
]

CELL_VALUE_TYPES = (
    IntCell,
    FloatCell,
    StringCell,
    BoolCell,
    DateTimeCell,
    DateTimeIsoCell,
    DurationIsoCell,
    ErrorCell,
    EmptyCell,
)


def is_missing(value: Any) -> bool:
    """Check whether a plain Python value stands for an absent cell."""
    if value is None or value is pd.NaT or value is pd.NA:
        return True
    if isinstance(value, (float, np.floating)):
        return math.isnan(value)
    if isinstance(value, (np.datetime64, np.timedelta64)):
        return bool(np.isnat(value))
    return False


def to_cell_value(value: Any) -> CellValue:
    """Convert a plain Python value into a CellValue.

    Args:
        value: Value read from a DataFrame, a worksheet or a literal grid

    Returns:
        The matching CellValue variant
    """
    if isinstance(value, CELL_VALUE_TYPES):
        return value
    if is_missing(value):
        return EMPTY
    if isinstance(value, CellErrorType):
        return ErrorCell(value)
    # bool before int: bool is an int subclass
    if isinstance(value, (bool, np.bool_)):
        return BoolCell(bool(value))
    if isinstance(value, (int, np.integer)):
        return IntCell(int(value))
    if isinstance(value, (float, np.floating)):
        return FloatCell(float(value))
    if isinstance(value, str):
        return StringCell(value)
    # datetime before date: datetime is a date subclass
    if isinstance(value, (datetime, np.datetime64)):
        return DateTimeCell(value, is_datetime=True)
    # time of day is an elapsed interval since midnight
    if isinstance(value, (timedelta, np.timedelta64, time)):
        return DateTimeCell(value, is_datetime=False)
    if isinstance(value, date):
        return DateTimeIsoCell(value.isoformat())
    return StringCell(str(value))
