"""Schema builder.

Walks the declared column names in order and, for every participating
column, resolves its type through a lookup-and-fallback chain:

| selection | lookup order                                   |
|-----------|------------------------------------------------|
| all       | override by name -> override by index -> scan  |
| by name   | override by name -> scan                       |
| by index  | override by index -> scan                      |

Scanning only happens when no override matched. Display names are
aliased against the names emitted so far. Any failure aborts the whole
build; a partial schema is never returned.
"""

import logging
from typing import AbstractSet, Callable, Optional, Sequence

from cells.source import CellSource
from core.dtype import DType
from core.errors import IncompatibleColumnTypesError
from inference.classifier import RECOVERABLE_CELL_ERRORS
from inference.resolver import resolve_column

from .aliasing import NameAliaser
from .fields import Field, Schema
from .overrides import TypeOverrideMap
from .selection import ColumnSelection, SelectionKind

logger = logging.getLogger(__name__)

OverrideLookup = Callable[[TypeOverrideMap, int, str], Optional[DType]]


def _by_name(overrides: TypeOverrideMap, idx: int, name: str) -> Optional[DType]:
    return overrides.type_for_name(name)


def _by_index(overrides: TypeOverrideMap, idx: int, name: str) -> Optional[DType]:
    return overrides.type_for_index(idx)


LOOKUP_ORDER: dict[SelectionKind, tuple[OverrideLookup, ...]] = {
    SelectionKind.ALL: (_by_name, _by_index),
    SelectionKind.BY_NAME: (_by_name,),
    SelectionKind.BY_INDEX: (_by_index,),
}


class SchemaBuilder:
    """Builds the schema of a cell source for one row window.

    The builder holds no state between builds; each call to build() uses
    a fresh aliaser.
    """

    def __init__(
        self,
        source: CellSource,
        column_names: Sequence[str],
        start_row: int,
        row_limit: int,
        selection: Optional[ColumnSelection] = None,
        overrides: Optional[TypeOverrideMap] = None,
        recoverable_errors: AbstractSet = RECOVERABLE_CELL_ERRORS,
    ):
        """Initialize the builder.

        Args:
            source: Cell source to scan
            column_names: Declared column names, one per source column
            start_row: First row scanned (inclusive)
            row_limit: Row after the last one scanned (exclusive)
            selection: Column selection (all columns if omitted)
            overrides: User type overrides (none if omitted)
            recoverable_errors: Cell error codes classified as null
        """
        self.source = source
        self.column_names = list(column_names)
        self.start_row = start_row
        self.row_limit = row_limit
        self.selection = selection or ColumnSelection.all()
        self.overrides = overrides
        self.recoverable_errors = recoverable_errors

    def column_type(self, col_idx: int, name: str) -> DType:
        """Resolve one participating column's type.

        Args:
            col_idx: Source column index
            name: Declared column name

        Returns:
            Override type if one matched, otherwise the scanned type
        """
        if self.overrides:
            for lookup in LOOKUP_ORDER[self.selection.kind]:
                dtype = lookup(self.overrides, col_idx, name)
                if dtype is not None:
                    logger.debug(f"Column '{name}' ({col_idx}): override -> {dtype}")
                    return dtype

        try:
            return resolve_column(
                self.source,
                self.start_row,
                self.row_limit,
                col_idx,
                self.recoverable_errors,
            )
        except IncompatibleColumnTypesError as e:
            raise IncompatibleColumnTypesError(e.types, column=name) from e

    def build(self) -> Schema:
        """Build the schema.

        Returns:
            Schema with one field per participating column, in declared order

        Raises:
            CellOutOfRangeError: If a scanned cell does not exist
            UnsupportedCellError: If a scanned cell carries a fatal error code
            IncompatibleColumnTypesError: If a column's types cannot be unified
        """
        logger.info(
            f"Building schema for {len(self.column_names)} declared columns, "
            f"rows [{self.start_row}, {self.row_limit}), selection={self.selection}"
        )
        unmatched = self.selection.unmatched(self.column_names)
        if unmatched:
            logger.warning(f"Selected columns not found in declared columns: {unmatched}")

        aliaser = NameAliaser()
        fields = []
        for declared_idx, name in enumerate(self.column_names):
            col_idx = self.selection.source_index_for(name, declared_idx)
            if col_idx is None:
                continue
            dtype = self.column_type(col_idx, name)
            alias = aliaser.alias(name)
            if alias != name:
                logger.debug(f"Column '{name}' ({col_idx}) aliased to '{alias}'")
            fields.append(Field(alias, dtype))

        schema = Schema(tuple(fields))
        logger.info(f"Schema built: {len(schema)} fields")
        return schema


def build_schema(
    source: CellSource,
    column_names: Sequence[str],
    start_row: int,
    row_limit: int,
    selection: Optional[ColumnSelection] = None,
    overrides: Optional[TypeOverrideMap] = None,
    recoverable_errors: AbstractSet = RECOVERABLE_CELL_ERRORS,
) -> Schema:
    """Build the schema of `source` over rows [start_row, row_limit)."""
    return SchemaBuilder(
        source,
        column_names,
        start_row,
        row_limit,
        selection=selection,
        overrides=overrides,
        recoverable_errors=recoverable_errors,
    ).build()


def infer_column_types(
    source: CellSource,
    column_names: Sequence[str],
    start_row: int = 0,
    row_limit: Optional[int] = None,
    **kwargs,
) -> dict[str, DType]:
    """Map each emitted display name to its resolved type."""
    if row_limit is None:
        row_limit = source.height
    schema = build_schema(source, column_names, start_row, row_limit, **kwargs)
    return {f.name: f.dtype for f in schema}
