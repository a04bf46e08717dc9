"""Cell source abstraction.

A cell source is an immutable, randomly-indexable two-dimensional grid of
CellValue. Out-of-range access is always an error, never a default value.
"""

from typing import Any, Iterable, Protocol, Sequence, runtime_checkable

from core.errors import CellOutOfRangeError

from .values import EMPTY, CellValue, to_cell_value


@runtime_checkable
class CellSource(Protocol):
    """Read-only grid of raw cell values."""

    @property
    def height(self) -> int:
        ...

    @property
    def width(self) -> int:
        ...

    def get(self, row: int, col: int) -> CellValue:
        """Return the cell at (row, col) or raise CellOutOfRangeError."""
        ...


def check_bounds(source: CellSource, row: int, col: int) -> None:
    """Raise CellOutOfRangeError if (row, col) lies outside the source."""
    if not (0 <= row < source.height and 0 <= col < source.width):
        raise CellOutOfRangeError(row, col)


class GridCellSource:
    """In-memory cell source built from rows of CellValue.

    Short rows are padded with empty cells up to the widest row (or up to
    `width`, if larger), so the grid is always rectangular.
    """

    def __init__(self, rows: Iterable[Sequence[CellValue]], width: int = 0):
        materialized = [tuple(row) for row in rows]
        self._width = max([width, *(len(row) for row in materialized)])
        self._rows = tuple(
            row + (EMPTY,) * (self._width - len(row)) for row in materialized
        )

    @classmethod
    def from_values(cls, rows: Iterable[Sequence[Any]]) -> "GridCellSource":
        """Build a grid from plain Python values (see to_cell_value)."""
        return cls([to_cell_value(value) for value in row] for row in rows)

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return self._width

    def get(self, row: int, col: int) -> CellValue:
        check_bounds(self, row, col)
        return self._rows[row][col]

    def __repr__(self) -> str:
        return f"GridCellSource(height={self.height}, width={self.width})"
