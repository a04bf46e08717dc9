"""Schema inference options: model and configuration file loading."""

from .schema import SchemaOptions
from .validator import (
    load_and_validate_options,
    load_config_file,
    validate_options,
)

__all__ = [
    "SchemaOptions",
    "load_config_file",
    "validate_options",
    "load_and_validate_options",
]
