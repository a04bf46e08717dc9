"""User-supplied column type overrides.

Keys are column identifiers: an int addresses a column by its zero-based
index, a str by its declared name. Both kinds may live in the same map;
every lookup uses exactly one kind. Type strings are validated when the
map is built, never later.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from core.dtype import DType
from core.errors import InvalidParametersError

IdxOrName = Union[int, str]


class TypeOverrideMap:
    """Immutable mapping from column identifier to DType."""

    def __init__(self, overrides: Optional[Mapping[IdxOrName, Any]] = None):
        """Build the map, parsing every type string.

        Args:
            overrides: Mapping of column index or name to a vocabulary
                string (or DType)

        Raises:
            InvalidTypeNameError: If a type string is not in the vocabulary
            InvalidParametersError: If a key is neither an int nor a str
        """
        by_name: dict[str, DType] = {}
        by_index: dict[int, DType] = {}
        for key, raw_dtype in (overrides or {}).items():
            # bool is an int subclass but never a column index
            if isinstance(key, bool) or not isinstance(key, (int, str)):
                raise InvalidParametersError(
                    f"column identifier must be an index or a name, got {key!r}"
                )
            dtype = DType.parse(raw_dtype)
            if isinstance(key, int):
                if key < 0:
                    raise InvalidParametersError(f"column index must be >= 0, got {key}")
                by_index[key] = dtype
            else:
                by_name[key] = dtype

        self._by_name = MappingProxyType(by_name)
        self._by_index = MappingProxyType(by_index)

    def type_for_name(self, name: str) -> Optional[DType]:
        return self._by_name.get(name)

    def type_for_index(self, idx: int) -> Optional[DType]:
        return self._by_index.get(idx)

    def __len__(self) -> int:
        return len(self._by_name) + len(self._by_index)

    def __bool__(self) -> bool:
        return len(self) > 0

    def to_dict(self) -> dict[IdxOrName, str]:
        """Serialize back to the user-facing vocabulary."""
        result: dict[IdxOrName, str] = {idx: str(t) for idx, t in self._by_index.items()}
        result.update({name: str(t) for name, t in self._by_name.items()})
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeOverrideMap):
            return NotImplemented
        return self._by_name == other._by_name and self._by_index == other._by_index

    def __repr__(self) -> str:
        return f"TypeOverrideMap({self.to_dict()!r})"
