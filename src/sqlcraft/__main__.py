"""Command line entry point.

Usage:
    # Build a SELECT from intent text on stdin
    printf 'table: users\ncolumns: id, name\n' | python -m sqlcraft

    # Reformat existing SQL for PostgreSQL with quoted identifiers
    python -m sqlcraft --type custom --database postgresql query.sql
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from sqlcraft.common.exceptions import SqlCraftError, configuration_error
from sqlcraft.constants.sql import Dialect, QueryKind
from sqlcraft.engine import process_sql_query_builder
from sqlcraft.logging import setup_logging
from sqlcraft.settings import SqlCraftSettings, get_settings
from sqlcraft.types.config import QueryBuilderConfig


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="sqlcraft",
        description="Build, format and analyze SQL from line-oriented intent text",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="File with intent text or SQL (default: stdin)",
    )
    parser.add_argument(
        "--type", "-t",
        dest="query_type",
        choices=[kind.value for kind in QueryKind],
        help="Query kind (default from SQLCRAFT_DEFAULT_QUERY_TYPE)",
    )
    parser.add_argument(
        "--database", "-d",
        choices=[dialect.value for dialect in Dialect],
        help="Target dialect (default from SQLCRAFT_DEFAULT_DATABASE)",
    )
    parser.add_argument("--indent", dest="indent_size", type=int, help="Spaces per continuation line")
    parser.add_argument("--no-format", dest="format_output", action="store_false", default=None)
    parser.add_argument("--no-comments", dest="include_comments", action="store_false", default=None)
    parser.add_argument("--no-validate", dest="validate_syntax", action="store_false", default=None)
    parser.add_argument("--examples", dest="generate_examples", action="store_true", default=None)
    parser.add_argument("--escape", dest="escape_identifiers", action="store_true", default=None)
    parser.add_argument("--lowercase-keywords", dest="uppercase_keywords", action="store_false", default=None)
    return parser


def _invalid(error: ValidationError) -> SqlCraftError:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    message = f"{field}: {first['msg']}" if field else first["msg"]
    return configuration_error(f"Invalid configuration: {message}", cause=error)


def load_settings() -> SqlCraftSettings:
    """Read ``SQLCRAFT_*`` settings.

    Raises:
        SqlCraftError: With CONFIG_INVALID code for invalid environment values
    """
    try:
        return get_settings()
    except ValidationError as e:
        raise _invalid(e)


def build_config(args: argparse.Namespace, settings: SqlCraftSettings) -> QueryBuilderConfig:
    """Merge parsed arguments over the environment settings.

    Raises:
        SqlCraftError: With CONFIG_INVALID code for out-of-range values
    """
    overrides = {
        field: getattr(args, field)
        for field in (
            "query_type", "database", "indent_size", "format_output", "include_comments",
            "validate_syntax", "generate_examples", "escape_identifiers", "uppercase_keywords",
        )
    }
    try:
        return settings.default_config(**overrides)
    except ValidationError as e:
        raise _invalid(e)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the sqlcraft command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    with args.input as stream:
        try:
            settings = load_settings()
            setup_logging(settings.log_level)
            config = build_config(args, settings)
        except SqlCraftError as e:
            print(f"error: {e.message}", file=sys.stderr)
            return 2

        input_text = stream.read()

    result = process_sql_query_builder(input_text, config)
    if not result.success:
        print(f"error: {result.error}", file=sys.stderr)
        return 1

    print(result.output)
    for warning in result.warnings:
        print(f"warning: {warning}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
