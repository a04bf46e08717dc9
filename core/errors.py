"""Error taxonomy for schema inference.

Every error raised while building a schema derives from SheetSchemaError
and carries the context needed to produce a precise user-facing message
(row/column coordinates, the offending type set, or the offending string).
None of these errors are recovered internally: they abort the current build.
"""

from typing import Any, Iterable, Optional


class SheetSchemaError(Exception):
    """Base class for all schema inference errors."""

    pass


class CellOutOfRangeError(SheetSchemaError):
    """Raised when a requested cell does not exist in the cell source."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"no cell data at row {row}, column {col}")


class UnsupportedCellError(SheetSchemaError):
    """Raised when a cell carries an error code that is not treated as null."""

    def __init__(self, code: Any, row: Optional[int] = None, col: Optional[int] = None):
        self.code = code
        self.row = row
        self.col = col
        location = f" at row {row}, column {col}" if row is not None else ""
        super().__init__(f"unsupported cell error {_code_text(code)}{location}")


class IncompatibleColumnTypesError(SheetSchemaError):
    """Raised when a column's observed types have no promotion target."""

    def __init__(self, types: Iterable[Any], column: Optional[str] = None):
        self.types = frozenset(types)
        self.column = column
        names = ", ".join(sorted(str(t) for t in self.types))
        prefix = f"column '{column}': " if column is not None else ""
        super().__init__(f"{prefix}unsupported column type combination: {{{names}}}")


class InvalidTypeNameError(SheetSchemaError):
    """Raised when a type override string is not part of the vocabulary."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f'unsupported dtype: "{text}"')


class InvalidParametersError(SheetSchemaError):
    """Raised when caller-supplied parameters are inconsistent."""

    pass


class DatasetLoadError(SheetSchemaError):
    """Raised when a dataset cannot be opened as a cell source."""

    pass


class OptionsValidationError(SheetSchemaError):
    """Raised when a schema options configuration fails validation."""

    pass


def _code_text(code: Any) -> str:
    # CellErrorType is a str enum; show its literal rather than the member name
    return getattr(code, "value", str(code))
