"""Options loader for schema inference configuration files.

This module handles loading YAML/JSON configuration files and validating
them against SchemaOptions. It provides clear, user-friendly error messages.
"""

import json
import pathlib
from typing import Union

import yaml
from pydantic import ValidationError

from core.errors import OptionsValidationError
from options.schema import SchemaOptions
from utils import PathValidationError, is_supported_config_format, validate_path_safe


def load_config_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Load configuration from YAML or JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary containing configuration

    Raises:
        OptionsValidationError: If file cannot be loaded or parsed
    """
    try:
        config_path = validate_path_safe(
            config_path, must_exist=True, must_be_file=True
        )
    except PathValidationError as e:
        raise OptionsValidationError(f"Invalid configuration path: {e}") from e
    except FileNotFoundError as e:
        raise OptionsValidationError(f"Configuration file not found: {config_path}") from e

    if not is_supported_config_format(config_path):
        raise OptionsValidationError(
            f"Unsupported file format: {config_path.suffix}. "
            "Supported formats: .yaml, .yml, .json"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix.lower() == ".json":
                config = json.load(f)
            else:
                config = yaml.safe_load(f)
    except OSError as e:
        raise OptionsValidationError(f"Failed to read configuration file {config_path}: I/O error: {e}") from e
    except yaml.YAMLError as e:
        raise OptionsValidationError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise OptionsValidationError(f"Invalid JSON syntax in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise OptionsValidationError(f"Failed to decode configuration file {config_path}: Encoding error: {e}") from e

    if config is None:
        return {}

    if not isinstance(config, dict):
        raise OptionsValidationError(
            f"Configuration must be a dictionary, got {type(config).__name__}"
        )

    return config


def validate_options(config: dict) -> SchemaOptions:
    """Validate configuration against SchemaOptions.

    Args:
        config: Configuration dictionary

    Returns:
        Validated SchemaOptions instance

    Raises:
        OptionsValidationError: If validation fails with user-friendly error message
    """
    try:
        return SchemaOptions.model_validate(config)
    except ValidationError as e:
        error_msg = _format_validation_error(e)
        raise OptionsValidationError(f"Options validation failed:\n{error_msg}") from e


def _format_validation_error(error: ValidationError) -> str:
    """Format a Pydantic validation error, one line per field."""
    errors = []
    for err in error.errors():
        field_path = " -> ".join(str(loc) for loc in err.get("loc", []))
        error_msg = err.get("msg", "Validation error")
        error_type = err.get("type", "unknown")
        errors.append(f"  {field_path}: {error_msg} ({error_type})")
    return "\n".join(errors)


def load_and_validate_options(config_path: Union[str, pathlib.Path]) -> SchemaOptions:
    """Load and validate options from a configuration file.

    Args:
        config_path: Path to YAML or JSON configuration file

    Returns:
        Validated SchemaOptions instance

    Raises:
        OptionsValidationError: If loading or validation fails
    """
    config = load_config_file(config_path)
    return validate_options(config)
