"""Schema inference options using Pydantic.

This module defines the immutable configuration contract for one schema
inference run: where the header sits, which rows are scanned, which
columns are selected and which column types are forced.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.dtype import DType
from core.errors import SheetSchemaError
from schema_builder.overrides import TypeOverrideMap
from schema_builder.selection import ColumnSelection


class SchemaOptions(BaseModel):
    """Options for a schema inference run.

    Once validated, options are read-only.
    """

    header_row: Optional[int] = Field(
        default=0, ge=0, description="Row holding the column names (None: no header)"
    )
    skip_rows: int = Field(default=0, ge=0, description="Data rows skipped after the header")
    n_rows: Optional[int] = Field(default=None, ge=0, description="Max data rows scanned")
    sheet: Union[int, str, None] = Field(default=None, description="Sheet name or index (.xlsx)")
    column_names: Optional[list[str]] = Field(
        default=None, description="Explicit declared column names"
    )
    use_columns: Union[list[int], list[str], None] = Field(
        default=None, description="Selected column names or indices"
    )
    dtypes: dict[Union[int, str], DType] = Field(
        default_factory=dict, description="Column type overrides"
    )

    @field_validator("dtypes", mode="before")
    @classmethod
    def parse_dtypes(cls, v):
        """Parse override type strings against the fixed vocabulary."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError(f"dtypes must be a mapping, got {type(v).__name__}")
        try:
            return {key: DType.parse(raw) for key, raw in v.items()}
        except SheetSchemaError as e:
            raise ValueError(str(e)) from e

    @field_validator("use_columns")
    @classmethod
    def validate_use_columns(cls, v):
        """Reject an empty column selection."""
        if v is not None and not v:
            raise ValueError("use_columns cannot be empty")
        return v

    @field_validator("column_names")
    @classmethod
    def validate_column_names(cls, v):
        """Reject an empty explicit name list."""
        if v is not None and not v:
            raise ValueError("column_names cannot be empty")
        return v

    def selection(self) -> ColumnSelection:
        """Column selection described by use_columns."""
        return ColumnSelection.from_value(self.use_columns)

    def overrides(self) -> Optional[TypeOverrideMap]:
        """Type override map described by dtypes (None when empty)."""
        if not self.dtypes:
            return None
        return TypeOverrideMap(self.dtypes)

    def row_window(self, height: int) -> tuple[int, int]:
        """Half-open data row range scanned for a source of `height` rows.

        Args:
            height: Number of data rows in the cell source

        Returns:
            (start_row, row_limit), clipped to the source
        """
        start = min(self.skip_rows, height)
        if self.n_rows is None:
            return start, height
        return start, min(start + self.n_rows, height)

    model_config = ConfigDict(
        frozen=True,  # Options are immutable after validation
        extra="forbid",  # Reject unknown keys
    )
