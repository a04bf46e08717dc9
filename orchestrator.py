"""Pipeline orchestrator for schema inference runs.

This module defines the SchemaInferencePipeline class which accepts
validated options and a dataset path, opens the dataset as a cell source
and builds its schema.
"""

import logging
from pathlib import Path
from typing import Optional

from ingestion.loader import LoadedSheet, load_sheet
from options.schema import SchemaOptions
from schema_builder.builder import SchemaBuilder
from schema_builder.fields import Schema

logger = logging.getLogger(__name__)


class SchemaInferencePipeline:
    """Orchestrates one schema inference run.

    Args:
        dataset_path: Path of the dataset to inspect
        options: Validated SchemaOptions instance
    """

    def __init__(self, dataset_path: str | Path, options: Optional[SchemaOptions] = None):
        """Initialize the pipeline.

        Args:
            dataset_path: Path of the dataset to inspect
            options: Validated SchemaOptions instance (read-only)

        Raises:
            InvalidParametersError: If the column selection is malformed
        """
        self.dataset_path = Path(dataset_path)
        self.options = options or SchemaOptions()
        # Built up front so configuration errors surface before any I/O
        self.selection = self.options.selection()
        self.overrides = self.options.overrides()

        logger.info("SchemaInferencePipeline initialized")
        logger.debug(f"Dataset: {self.dataset_path}")
        logger.debug(f"Selection: {self.selection}, overrides: {self.overrides}")

    def load(self) -> LoadedSheet:
        """Open the dataset as a cell source."""
        return load_sheet(self.dataset_path, self.options)

    def run(self) -> Schema:
        """Run schema inference.

        Returns:
            The built Schema

        Raises:
            DatasetLoadError: If the dataset cannot be opened
            SheetSchemaError: If schema construction fails
        """
        sheet = self.load()
        start_row, row_limit = self.options.row_window(sheet.source.height)

        schema = SchemaBuilder(
            sheet.source,
            sheet.column_names,
            start_row,
            row_limit,
            selection=self.selection,
            overrides=self.overrides,
        ).build()

        for field in schema:
            logger.info(f"  {field.name}: {field.dtype}")
        return schema
