"""Dataset loader for schema inference.

This module opens datasets from disk in supported formats (CSV, Parquet,
XLSX) and exposes them as read-only cell sources together with their
declared column names. It validates file existence and format without
modifying the data.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from cells.adapters import DataFrameCellSource, WorksheetCellSource, unnamed_column
from cells.source import CellSource
from core.errors import DatasetLoadError
from options.schema import SchemaOptions
from utils import (
    PathValidationError,
    get_file_extension,
    get_logger,
    is_supported_dataset_format,
    validate_path_safe,
)

logger = get_logger(__name__)

DTYPE_BACKEND = "numpy_nullable"


@dataclass(frozen=True)
class LoadedSheet:
    """A dataset opened as a cell source.

    Row 0 of the source is the first data row (the header, if any, has
    already been split off into column_names).
    """

    source: CellSource
    column_names: list[str]
    path: Path


def _read_csv_header(file_path: Path, header_row: int) -> list[str]:
    # pandas mangles duplicate labels ("id", "id.1"), so read the raw header row
    header = pd.read_csv(
        file_path, header=None, skiprows=header_row, nrows=1, dtype=str, keep_default_na=False
    )
    return [name or unnamed_column(idx) for idx, name in enumerate(header.iloc[0])]


def _read_frame(file_path: Path, extension: str, header_row: Optional[int]) -> pd.DataFrame:
    # nullable dtypes keep integer columns with gaps as Int64 instead of float64
    if extension != "csv":
        return pd.read_parquet(file_path, dtype_backend=DTYPE_BACKEND)
    df = pd.read_csv(file_path, header=header_row, dtype_backend=DTYPE_BACKEND)
    if header_row is None:
        df.columns = [unnamed_column(idx) for idx in range(df.shape[1])]
    else:
        df.columns = _read_csv_header(file_path, header_row)
    return df


def _select_worksheet(workbook, sheet: Union[int, str, None]):
    if sheet is None:
        return workbook.worksheets[0]
    if isinstance(sheet, int):
        try:
            return workbook.worksheets[sheet]
        except IndexError:
            raise DatasetLoadError(
                f"Sheet index {sheet} out of range: workbook has {len(workbook.worksheets)} sheets"
            ) from None
    if sheet not in workbook.sheetnames:
        raise DatasetLoadError(
            f"Sheet '{sheet}' not found. Available sheets: {workbook.sheetnames}"
        )
    return workbook[sheet]


def _read_workbook(file_path: Path, options: SchemaOptions) -> WorksheetCellSource:
    workbook = load_workbook(file_path, read_only=True, data_only=True)
    try:
        worksheet = _select_worksheet(workbook, options.sheet)
        logger.debug(f"Reading sheet '{worksheet.title}'")
        return WorksheetCellSource(worksheet, header_row=options.header_row)
    finally:
        workbook.close()


def load_sheet(file_path: str | Path, options: Optional[SchemaOptions] = None) -> LoadedSheet:
    """Open a dataset as a cell source.

    Supports CSV and Parquet (through pandas) and XLSX (through openpyxl).

    Args:
        file_path: Path to dataset file
        options: Schema options (header row, sheet, explicit column names)

    Returns:
        LoadedSheet with the cell source and declared column names

    Raises:
        DatasetLoadError: If file doesn't exist, format is unsupported, or loading fails
    """
    options = options or SchemaOptions()

    try:
        file_path = validate_path_safe(file_path, must_exist=True, must_be_file=True)
    except PathValidationError as e:
        raise DatasetLoadError(f"Invalid dataset path: {e}") from e
    except FileNotFoundError as e:
        raise DatasetLoadError(f"Dataset file not found: {file_path}") from e

    extension = get_file_extension(file_path)
    if not is_supported_dataset_format(file_path):
        raise DatasetLoadError(
            f"Unsupported file format: .{extension}. Supported formats: .csv, .parquet, .xlsx"
        )

    logger.info(f"Loading dataset from: {file_path}")

    try:
        if extension == "xlsx":
            source = _read_workbook(file_path, options)
        else:
            source = DataFrameCellSource(_read_frame(file_path, extension, options.header_row))
    except DatasetLoadError:
        raise
    except OSError as e:
        raise DatasetLoadError(f"Failed to read dataset file {file_path}: I/O error: {e}") from e
    except pd.errors.EmptyDataError as e:
        raise DatasetLoadError(f"Dataset file is empty: {file_path}") from e
    except pd.errors.ParserError as e:
        raise DatasetLoadError(f"Failed to parse dataset file {file_path}: {e}") from e
    except InvalidFileException as e:
        raise DatasetLoadError(f"Failed to open workbook {file_path}: {e}") from e
    except ImportError as e:
        raise DatasetLoadError(
            f"Failed to load dataset {file_path}: Missing required library for .{extension} format: {e}"
        ) from e

    column_names = list(options.column_names) if options.column_names else source.column_names
    logger.info(f"Dataset loaded: {source.height} rows, {source.width} columns")
    logger.debug(f"Column names: {column_names}")

    return LoadedSheet(source=source, column_names=column_names, path=file_path)
