import pytest

from cells.source import GridCellSource
from cells.values import EMPTY, BoolCell, FloatCell, IntCell, StringCell


@pytest.fixture()
def mixed_column():
    """Single column mixing every scalar kind, one cell per row."""
    return GridCellSource(
        [
            [BoolCell(True)],
            [BoolCell(False)],
            [StringCell("NULL")],
            [IntCell(42)],
            [FloatCell(13.37)],
            [StringCell("hello")],
            [EMPTY],
            [StringCell("#N/A")],
            [IntCell(12)],
            [FloatCell(12.21)],
            [BoolCell(True)],
            [IntCell(1337)],
        ]
    )


@pytest.fixture()
def duplicate_names_sheet():
    """Columns: id (ints), id (strings), val (ints, floats and nulls)."""
    return GridCellSource.from_values(
        [
            [1, "a", 1],
            [2, "b", 2.5],
            [3, "c", None],
            [4, "d", "NA"],
        ]
    )
