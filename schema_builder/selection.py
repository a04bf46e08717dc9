"""Column selection policy.

Decides which declared columns take part in the schema and, through its
kind, in which order type overrides are looked up. Columns that are not
selected are silently left out.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Sequence

from core.errors import InvalidParametersError


class SelectionKind(str, Enum):
    """How columns are addressed."""

    ALL = "all"
    BY_NAME = "by_name"
    BY_INDEX = "by_index"


@dataclass(frozen=True)
class ColumnSelection:
    """Which declared columns participate in the schema."""

    kind: SelectionKind = SelectionKind.ALL
    members: frozenset = frozenset()

    @classmethod
    def all(cls) -> "ColumnSelection":
        return cls()

    @classmethod
    def by_name(cls, names: Iterable[str]) -> "ColumnSelection":
        return cls(SelectionKind.BY_NAME, frozenset(names))

    @classmethod
    def by_index(cls, indices: Iterable[int]) -> "ColumnSelection":
        indices = frozenset(indices)
        negative = sorted(idx for idx in indices if idx < 0)
        if negative:
            raise InvalidParametersError(f"column indices must be >= 0, got {negative}")
        return cls(SelectionKind.BY_INDEX, indices)

    @classmethod
    def from_value(cls, value: Optional[Sequence[Any]]) -> "ColumnSelection":
        """Build a selection from a user-facing value.

        Args:
            value: None for all columns, a list of names, or a list of indices

        Returns:
            ColumnSelection instance

        Raises:
            InvalidParametersError: If the list is empty or mixes names and indices
        """
        if value is None:
            return cls.all()
        if isinstance(value, (str, bytes)) or not value:
            raise InvalidParametersError(
                f"use_columns must be a non-empty list of names or indices, got {value!r}"
            )
        if all(isinstance(v, str) for v in value):
            return cls.by_name(value)
        if all(isinstance(v, int) and not isinstance(v, bool) for v in value):
            return cls.by_index(value)
        raise InvalidParametersError(
            f"use_columns cannot mix names and indices: {list(value)!r}"
        )

    def source_index_for(self, name: str, declared_idx: int) -> Optional[int]:
        """Map a declared column onto its source column index.

        A selected name that is declared more than once selects every
        occurrence, each at its own declared index.

        Args:
            name: Name of the declared column
            declared_idx: Position of the declared column

        Returns:
            Source column index, or None if the column does not participate
        """
        if self.kind is SelectionKind.ALL:
            return declared_idx
        if self.kind is SelectionKind.BY_NAME:
            return declared_idx if name in self.members else None
        return declared_idx if declared_idx in self.members else None

    def unmatched(self, column_names: Sequence[str]) -> list:
        """Selected members that match no declared column."""
        if self.kind is SelectionKind.BY_NAME:
            declared = set(column_names)
            return sorted(name for name in self.members if name not in declared)
        if self.kind is SelectionKind.BY_INDEX:
            return sorted(idx for idx in self.members if idx >= len(column_names))
        return []

    def __str__(self) -> str:
        if self.kind is SelectionKind.ALL:
            return "all"
        return f"{self.kind.value}({sorted(self.members)})"
