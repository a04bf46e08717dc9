"""Cell sources backed by pandas DataFrames and openpyxl worksheets.

Both adapters take a read-only snapshot of their input at construction
time and expose the declared column names alongside the cell grid.
"""

import logging
from typing import Any, Optional

import pandas as pd
from openpyxl.worksheet.worksheet import Worksheet

from .source import GridCellSource, check_bounds
from .values import CellErrorType, CellValue, ErrorCell, to_cell_value

logger = logging.getLogger(__name__)

UNNAMED_PREFIX = "__UNNAMED__"


def unnamed_column(idx: int) -> str:
    """Placeholder name for a column without a header."""
    return f"{UNNAMED_PREFIX}{idx}"


class DataFrameCellSource:
    """Cell source over a pandas DataFrame.

    Duplicate column labels are allowed; declared names are the labels
    converted to strings, in frame order.
    """

    def __init__(self, df: pd.DataFrame):
        self._values = df.to_numpy(dtype=object, copy=True)
        self.column_names = [str(label) for label in df.columns]
        logger.debug(
            f"DataFrameCellSource: {self.height} rows, {self.width} columns"
        )

    @property
    def height(self) -> int:
        return self._values.shape[0]

    @property
    def width(self) -> int:
        return self._values.shape[1]

    def get(self, row: int, col: int) -> CellValue:
        check_bounds(self, row, col)
        return to_cell_value(self._values[row, col])


def worksheet_cell_value(cell: Any) -> CellValue:
    """Convert one openpyxl cell into a CellValue."""
    if getattr(cell, "data_type", None) == "e":
        try:
            return ErrorCell(CellErrorType(cell.value))
        except ValueError:
            return ErrorCell(str(cell.value))
    return to_cell_value(cell.value)


class WorksheetCellSource(GridCellSource):
    """Snapshot of an openpyxl worksheet.

    When header_row is given (zero-based), that row provides the declared
    column names and only the rows below it are part of the grid. Rows
    above the header are discarded.
    """

    def __init__(self, worksheet: Worksheet, header_row: Optional[int] = None):
        raw_rows = [list(row) for row in worksheet.iter_rows()]
        width = max((len(row) for row in raw_rows), default=0)

        header: list[Any] = []
        if header_row is not None:
            if header_row < len(raw_rows):
                header = [cell.value for cell in raw_rows[header_row]]
            raw_rows = raw_rows[header_row + 1 :]

        rows = [[worksheet_cell_value(cell) for cell in row] for row in raw_rows]
        # header columns stay addressable even when there are no data rows
        super().__init__(rows, width=width)

        self.column_names = [
            str(header[idx]) if idx < len(header) and header[idx] is not None else unnamed_column(idx)
            for idx in range(self.width)
        ]
        logger.debug(
            f"WorksheetCellSource '{getattr(worksheet, 'title', '?')}': "
            f"{self.height} rows, {self.width} columns"
        )
