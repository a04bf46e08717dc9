"""Logging utilities for sheetschema.

This module provides shared logging configuration and utilities
used across the entire application.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, level: Optional[int] = None) -> None:
    """Configure logging for sheetschema.

    Logs go to stderr so that the schema printed on stdout stays
    machine-readable. Safe to call more than once.

    Args:
        verbose: If True, set log level to DEBUG, otherwise WARNING
        level: Optional explicit log level (overrides verbose)
    """
    if level is not None:
        log_level = level
    else:
        log_level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=True,  # Override any existing configuration
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
