"""Constants for sheetschema.

This module defines shared constants used across the application.
"""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_OPTIONS = 1
EXIT_INFERENCE_ERROR = 2
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_NAME = "sheetschema"
APP_VERSION = "0.1.0"

# Supported file formats
SUPPORTED_DATASET_FORMATS = ["csv", "parquet", "xlsx"]
SUPPORTED_CONFIG_FORMATS = ["yaml", "yml", "json"]

# Output formats for the `infer` command
OUTPUT_FORMATS = ["json", "yaml", "arrow"]
