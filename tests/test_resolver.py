import random
from datetime import datetime

import pytest

from cells.source import GridCellSource
from cells.values import (
    CellErrorType,
    DateTimeCell,
    DateTimeIsoCell,
    DurationIsoCell,
    ErrorCell,
    IntCell,
    StringCell,
)
from core.dtype import DType
from core.errors import (
    CellOutOfRangeError,
    IncompatibleColumnTypesError,
    UnsupportedCellError,
)
from inference.resolver import resolve_column, resolve_types


@pytest.mark.parametrize(
    "start_row, end_row, expected",
    [
        (0, 2, DType.BOOL),  # pure bool
        (3, 4, DType.INT),  # pure int
        (4, 5, DType.FLOAT),  # pure float
        (5, 6, DType.STRING),  # pure string
        (3, 5, DType.FLOAT),  # int + float
        (2, 5, DType.FLOAT),  # null + int + float
        (4, 6, DType.STRING),  # float + string
        (3, 6, DType.STRING),  # int + float + string
        (2, 8, DType.STRING),  # null + int + float + string + empty + null
        (6, 9, DType.INT),  # empty + null + int
        (7, 10, DType.FLOAT),  # int + float + null
        (7, 11, DType.FLOAT),  # int + float + bool + null
        (10, 12, DType.INT),  # int + bool
    ],
)
def test_resolve_mixed_column(mixed_column, start_row, end_row, expected):
    assert resolve_column(mixed_column, start_row, end_row, 0) is expected


@pytest.mark.parametrize(
    "types, expected",
    [
        ({DType.BOOL}, DType.BOOL),
        ({DType.INT, DType.BOOL}, DType.INT),
        ({DType.INT, DType.FLOAT, DType.BOOL}, DType.FLOAT),
        ({DType.FLOAT, DType.STRING}, DType.STRING),
        ({DType.INT, DType.FLOAT, DType.STRING}, DType.STRING),
        (set(), DType.NULL),
        ({DType.NULL}, DType.NULL),
        ({DType.NULL, DType.DATE}, DType.DATE),
        ({DType.DURATION}, DType.DURATION),
    ],
)
def test_lattice_fixed_points(types, expected):
    assert resolve_types(types) is expected


@pytest.mark.parametrize(
    "types",
    [
        {DType.DATE, DType.INT},
        {DType.DATETIME, DType.DATE},
        {DType.DATETIME, DType.DURATION},
        {DType.BOOL, DType.STRING},
        {DType.BOOL, DType.FLOAT, DType.STRING},
    ],
)
def test_incompatible_combinations(types):
    with pytest.raises(IncompatibleColumnTypesError) as excinfo:
        resolve_types(types)
    assert excinfo.value.types == frozenset(types)


def test_incompatible_message_is_sorted():
    with pytest.raises(IncompatibleColumnTypesError, match=r"\{date, int\}"):
        resolve_types([DType.INT, DType.DATE])


def test_empty_range_is_null(mixed_column):
    assert resolve_column(mixed_column, 3, 3, 0) is DType.NULL


def test_resolution_is_order_independent(mixed_column):
    cells = [mixed_column.get(row, 0) for row in range(2, 10)]
    expected = resolve_column(mixed_column, 2, 10, 0)
    assert expected is DType.STRING
    rng = random.Random(0)
    for _ in range(50):
        rng.shuffle(cells)
        source = GridCellSource([[cell] for cell in cells])
        assert resolve_column(source, 0, len(cells), 0) is expected


def test_temporal_columns():
    source = GridCellSource(
        [
            [DateTimeCell(datetime(2024, 1, 1)), DateTimeIsoCell("2024-01-01"), DurationIsoCell("P1D")],
            [ErrorCell(CellErrorType.NA), DateTimeIsoCell("2024-01-02"), StringCell("")],
        ]
    )
    assert resolve_column(source, 0, 2, 0) is DType.DATETIME
    assert resolve_column(source, 0, 2, 1) is DType.DATE
    assert resolve_column(source, 0, 2, 2) is DType.DURATION


def test_first_error_aborts_the_scan():
    source = GridCellSource([[IntCell(1)], [ErrorCell(CellErrorType.DIV0)], [StringCell("x")]])
    with pytest.raises(UnsupportedCellError):
        resolve_column(source, 0, 3, 0)


def test_range_past_the_end_fails(mixed_column):
    with pytest.raises(CellOutOfRangeError) as excinfo:
        resolve_column(mixed_column, 10, 13, 0)
    assert excinfo.value.row == 12
