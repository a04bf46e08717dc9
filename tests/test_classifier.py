from datetime import date, datetime, time, timedelta

import pytest

from cells.source import GridCellSource
from cells.values import (
    EMPTY,
    BoolCell,
    CellErrorType,
    DateTimeCell,
    DateTimeIsoCell,
    DurationIsoCell,
    ErrorCell,
    FloatCell,
    IntCell,
    StringCell,
)
from core.dtype import DType
from core.errors import CellOutOfRangeError, UnsupportedCellError
from inference.classifier import (
    NULL_STRING_VALUES,
    classify_cell,
    classify_value,
    parse_iso_datetime,
)

NULL_TOKENS = [
    "", "#N/A", "#N/A N/A", "#NA", "-1.#IND", "-1.#QNAN", "-NaN", "-nan", "1.#IND", "1.#QNAN",
    "<NA>", "N/A", "NA", "NULL", "NaN", "None", "n/a", "nan", "null",
]


def test_null_token_table_has_19_literals():
    assert len(NULL_STRING_VALUES) == 19
    assert set(NULL_TOKENS) == NULL_STRING_VALUES


@pytest.mark.parametrize("token", NULL_TOKENS)
def test_null_tokens_classify_as_null(token):
    assert classify_value(StringCell(token)) is DType.NULL


@pytest.mark.parametrize("text", ["n.a.", "NIL", "Null ", "none", "NAN", " ", "0", "hello"])
def test_other_strings_classify_as_string(text):
    assert classify_value(StringCell(text)) is DType.STRING


@pytest.mark.parametrize(
    "value, expected",
    [
        (IntCell(1), DType.INT),
        (FloatCell(1.5), DType.FLOAT),
        (BoolCell(False), DType.BOOL),
        (DateTimeCell(datetime(2024, 1, 1), is_datetime=True), DType.DATETIME),
        (DateTimeCell(timedelta(hours=2), is_datetime=False), DType.DURATION),
        (DateTimeIsoCell("2024-03-01T10:15:00"), DType.DATETIME),
        (DateTimeIsoCell("2024-03-01T10:15:00.250"), DType.DATETIME),
        (DateTimeIsoCell("2024-03-01"), DType.DATE),
        (DurationIsoCell("PT1H30M"), DType.DURATION),
        (EMPTY, DType.NULL),
    ],
)
def test_scalar_cells(value, expected):
    assert classify_value(value) is expected


@pytest.mark.parametrize("code", [CellErrorType.NA, CellErrorType.VALUE, CellErrorType.NULL])
def test_recoverable_errors_are_null(code):
    assert classify_value(ErrorCell(code)) is DType.NULL


@pytest.mark.parametrize(
    "code",
    [CellErrorType.DIV0, CellErrorType.REF, CellErrorType.NAME, CellErrorType.NUM, "#SPILL!"],
)
def test_other_errors_are_fatal(code):
    source = GridCellSource([[IntCell(1)], [ErrorCell(code)]])
    with pytest.raises(UnsupportedCellError) as excinfo:
        classify_cell(source, 1, 0)
    assert excinfo.value.code == code
    assert (excinfo.value.row, excinfo.value.col) == (1, 0)


def test_stricter_error_policy_can_be_chosen():
    strict = frozenset({CellErrorType.NA})
    assert classify_value(ErrorCell(CellErrorType.NA), strict) is DType.NULL
    with pytest.raises(UnsupportedCellError):
        classify_value(ErrorCell(CellErrorType.VALUE), strict)


@pytest.mark.parametrize("row, col", [(2, 0), (0, 1), (-1, 0), (0, -1)])
def test_out_of_range_never_defaults(row, col):
    source = GridCellSource([[IntCell(1)], [IntCell(2)]])
    with pytest.raises(CellOutOfRangeError) as excinfo:
        classify_cell(source, row, col)
    assert (excinfo.value.row, excinfo.value.col) == (row, col)


def test_parse_iso_datetime_requires_time_part():
    assert parse_iso_datetime("2024-03-01 08:00:00") == datetime(2024, 3, 1, 8)
    assert parse_iso_datetime("2024-03-01") is None
    assert parse_iso_datetime("not a date") is None


def test_plain_python_dates_and_times():
    source = GridCellSource.from_values(
        [[date(2024, 1, 2), datetime(2024, 1, 2, 3, 4), time(12, 30), timedelta(days=1)]]
    )
    assert [classify_cell(source, 0, col) for col in range(4)] == [
        DType.DATE,
        DType.DATETIME,
        DType.DURATION,
        DType.DURATION,
    ]


def test_unknown_value_is_a_type_error():
    with pytest.raises(TypeError):
        classify_value(object())
