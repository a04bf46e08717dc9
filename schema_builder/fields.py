"""Schema value objects.

A Schema is the ordered list of (display name, type) pairs handed to the
columnar materializer. Every field is nullable; the type is projected to
its physical arrow type only when an arrow schema is requested.
"""

from dataclasses import dataclass
from typing import Iterator

import pyarrow as pa

from core.dtype import DType


@dataclass(frozen=True)
class Field:
    """A single named, nullable column."""

    name: str
    dtype: DType

    @property
    def nullable(self) -> bool:
        return True

    def to_arrow(self) -> pa.Field:
        return pa.field(self.name, self.dtype.arrow_type, nullable=True)


@dataclass(frozen=True)
class Schema:
    """Ordered, uniquely-named sequence of fields."""

    fields: tuple[Field, ...] = ()

    def __post_init__(self):
        names = [f.name for f in self.fields]
        if len(names) != len(set(names)):
            duplicates = sorted({n for n in names if names.count(n) > 1})
            raise ValueError(f"duplicate field names in schema: {duplicates}")

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __getitem__(self, idx: int) -> Field:
        return self.fields[idx]

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def dtypes(self) -> list[DType]:
        return [f.dtype for f in self.fields]

    def field(self, name: str) -> Field:
        """Look up a field by display name.

        Raises:
            KeyError: If no field has that name
        """
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)

    def to_dict(self) -> dict[str, str]:
        """Ordered mapping of display name to type string."""
        return {f.name: str(f.dtype) for f in self.fields}

    def to_arrow(self) -> pa.Schema:
        """Physical schema for the columnar materializer."""
        return pa.schema([f.to_arrow() for f in self.fields])
