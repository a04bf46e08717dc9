"""Dataset ingestion: open files on disk as cell sources."""

from .loader import LoadedSheet, load_sheet

__all__ = [
    "LoadedSheet",
    "load_sheet",
]
