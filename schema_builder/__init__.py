"""Schema construction: overrides, column selection, aliasing and the builder."""

from .aliasing import NameAliaser, alias_for_name
from .builder import SchemaBuilder, build_schema, infer_column_types
from .fields import Field, Schema
from .overrides import IdxOrName, TypeOverrideMap
from .selection import ColumnSelection, SelectionKind

__all__ = [
    "SchemaBuilder",
    "build_schema",
    "infer_column_types",
    "Field",
    "Schema",
    "TypeOverrideMap",
    "IdxOrName",
    "ColumnSelection",
    "SelectionKind",
    "NameAliaser",
    "alias_for_name",
]
