"""Column type resolver.

Combines the per-cell classifications of a column over a row range into a
single column type using a fixed promotion lattice:

- {Int, Bool} -> Int (booleans are integers without precision loss)
- {Int, Float, Bool} -> Float
- {Int, Float, String} -> String

Null observations never constrain the type since every column is nullable.
Temporal types never take part in promotion. No smarter guessing than
this is attempted.
"""

import logging
from typing import AbstractSet, Iterable

from cells.source import CellSource
from core.dtype import DType
from core.errors import IncompatibleColumnTypesError

from .classifier import RECOVERABLE_CELL_ERRORS, classify_cell

logger = logging.getLogger(__name__)

INT_TYPES = frozenset({DType.INT, DType.BOOL})
FLOAT_TYPES = frozenset({DType.INT, DType.FLOAT, DType.BOOL})
STRING_TYPES = frozenset({DType.INT, DType.FLOAT, DType.STRING})

# Checked in order: the first superset wins
PROMOTIONS = (
    (INT_TYPES, DType.INT),
    (FLOAT_TYPES, DType.FLOAT),
    (STRING_TYPES, DType.STRING),
)


def resolve_types(types: Iterable[DType]) -> DType:
    """Resolve a collection of observed cell types to one column type.

    Order and multiplicity of the observations do not matter.

    Args:
        types: Observed cell types

    Returns:
        The unified column type

    Raises:
        IncompatibleColumnTypesError: If no promotion target exists
    """
    column_types = set(types)
    column_types.discard(DType.NULL)

    if not column_types:
        return DType.NULL
    if len(column_types) == 1:
        return next(iter(column_types))
    for compatible, target in PROMOTIONS:
        if column_types <= compatible:
            return target
    raise IncompatibleColumnTypesError(column_types)


def resolve_column(
    source: CellSource,
    start_row: int,
    end_row: int,
    col: int,
    recoverable_errors: AbstractSet = RECOVERABLE_CELL_ERRORS,
) -> DType:
    """Resolve the type of column `col` over rows [start_row, end_row).

    Args:
        source: Cell source to scan
        start_row: First row scanned
        end_row: Row after the last one scanned
        col: Source column index
        recoverable_errors: Error codes classified as null

    Returns:
        The unified column type

    Raises:
        CellOutOfRangeError: If a scanned cell does not exist
        UnsupportedCellError: If a scanned cell carries a fatal error code
        IncompatibleColumnTypesError: If the observed types cannot be unified
    """
    observed = {
        classify_cell(source, row, col, recoverable_errors)
        for row in range(start_row, end_row)
    }
    dtype = resolve_types(observed)
    logger.debug(
        f"Column {col} rows [{start_row}, {end_row}): "
        f"observed={sorted(str(t) for t in observed)} -> {dtype}"
    )
    return dtype
