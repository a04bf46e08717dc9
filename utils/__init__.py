"""Shared utilities for sheetschema.

This module provides common utilities used across the application.
"""

from .constants import (
    APP_NAME,
    APP_VERSION,
    EXIT_INFERENCE_ERROR,
    EXIT_INVALID_OPTIONS,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    OUTPUT_FORMATS,
    SUPPORTED_CONFIG_FORMATS,
    SUPPORTED_DATASET_FORMATS,
)
from .file_helpers import (
    PathValidationError,
    get_file_extension,
    is_supported_config_format,
    is_supported_dataset_format,
    validate_path_safe,
)
from .logging import get_logger, setup_logging

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "EXIT_INFERENCE_ERROR",
    "EXIT_INVALID_OPTIONS",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "OUTPUT_FORMATS",
    "SUPPORTED_CONFIG_FORMATS",
    "SUPPORTED_DATASET_FORMATS",
    "PathValidationError",
    "get_file_extension",
    "get_logger",
    "is_supported_config_format",
    "is_supported_dataset_format",
    "setup_logging",
    "validate_path_safe",
]
