"""Command-line interface for sheetschema.

This module provides the CLI entry point. It handles argument parsing,
options validation, and pipeline execution, and prints the inferred
schema on stdout.
"""

import argparse
import json
import sys
from typing import Any, Optional, Sequence

import yaml

from core.errors import (
    DatasetLoadError,
    InvalidParametersError,
    OptionsValidationError,
    SheetSchemaError,
)
from options.validator import load_config_file, validate_options
from orchestrator import SchemaInferencePipeline
from schema_builder.fields import Schema
from utils import (
    APP_NAME,
    APP_VERSION,
    EXIT_INFERENCE_ERROR,
    EXIT_INVALID_OPTIONS,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    OUTPUT_FORMATS,
    get_logger,
    setup_logging,
)

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="sheetschema - infer a typed, uniquely-named schema from tabular data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    infer_parser = subparsers.add_parser("infer", help="Infer the schema of a dataset")
    infer_parser.add_argument("path", help="Dataset file (.csv, .parquet, .xlsx)")
    infer_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML/JSON options file (command-line flags take precedence)",
    )
    infer_parser.add_argument(
        "--dtype",
        action="append",
        default=[],
        metavar="COLUMN=TYPE",
        help="Force a column type; COLUMN is a name or a zero-based index (repeatable)",
    )
    infer_parser.add_argument(
        "--columns",
        type=str,
        default=None,
        help="Comma-separated column names or indices to include",
    )
    infer_parser.add_argument("--n-rows", type=int, default=None, help="Max data rows scanned")
    infer_parser.add_argument("--skip-rows", type=int, default=None, help="Data rows skipped")
    sheet_group = infer_parser.add_mutually_exclusive_group()
    sheet_group.add_argument(
        "--sheet",
        type=str,
        default=None,
        help="Sheet index or name (.xlsx); digits select by index, see --sheet-name",
    )
    sheet_group.add_argument(
        "--sheet-name",
        type=str,
        default=None,
        help="Sheet name (.xlsx), taken literally even when it is all digits",
    )
    infer_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="json",
        help="Output format (default: json)",
    )
    infer_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def _column_key(text: str) -> Any:
    """Digits address a column by index, anything else by name."""
    return int(text) if text.isdigit() else text


def build_config(args: argparse.Namespace) -> dict:
    """Merge the options file (if any) with command-line flags.

    Raises:
        OptionsValidationError: If the options file or a flag is malformed
    """
    config = load_config_file(args.config) if args.config else {}

    if args.dtype:
        dtypes = dict(config.get("dtypes") or {})
        for item in args.dtype:
            column, sep, dtype = item.partition("=")
            if not sep or not column:
                raise OptionsValidationError(f"--dtype expects COLUMN=TYPE, got '{item}'")
            dtypes[_column_key(column)] = dtype
        config["dtypes"] = dtypes
    if args.columns is not None:
        config["use_columns"] = [_column_key(c.strip()) for c in args.columns.split(",")]
    if args.n_rows is not None:
        config["n_rows"] = args.n_rows
    if args.skip_rows is not None:
        config["skip_rows"] = args.skip_rows
    if args.sheet is not None:
        config["sheet"] = _column_key(args.sheet)
    if args.sheet_name is not None:
        config["sheet"] = args.sheet_name

    return config


def render_schema(schema: Schema, output_format: str) -> str:
    """Render a schema for display."""
    if output_format == "yaml":
        return yaml.safe_dump(schema.to_dict(), sort_keys=False).rstrip("\n")
    if output_format == "arrow":
        return str(schema.to_arrow())
    return json.dumps(schema.to_dict(), indent=2)


def run_infer(args: argparse.Namespace) -> int:
    """Run the `infer` command.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        options = validate_options(build_config(args))
        pipeline = SchemaInferencePipeline(args.path, options)
    except (OptionsValidationError, InvalidParametersError) as e:
        print(f"✗ Invalid options:\n{e}", file=sys.stderr)
        return EXIT_INVALID_OPTIONS

    try:
        schema = pipeline.run()
    except DatasetLoadError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except SheetSchemaError as e:
        print(f"✗ Schema inference failed: {e}", file=sys.stderr)
        return EXIT_INFERENCE_ERROR

    print(render_schema(schema, args.format))
    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    if args.command == "infer":
        try:
            return run_infer(args)
        except KeyboardInterrupt:
            print("\n✗ Interrupted by user", file=sys.stderr)
            return EXIT_RUNTIME_ERROR
        except Exception as e:
            print(f"✗ Runtime error: {e}", file=sys.stderr)
            logger.exception("Unexpected error during schema inference")
            return EXIT_RUNTIME_ERROR

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
