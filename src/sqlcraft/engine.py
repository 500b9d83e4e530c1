"""Top-level orchestration of the query builder engine.

``process_sql_query_builder`` is the single entry point. It never raises:
every path returns a :class:`ToolResult`.

Flow:
    1. Blank input fails immediately.
    2. select/insert/update/delete: intent parser -> query builder.
       create/custom: the raw input is used as the rendered SQL.
    3. Formatter -> analyzer -> suggestions -> optional validation.
    4. Output assembly: comment banner, SQL, example footer, analysis block.
"""

from typing import List, Optional

from sqlcraft.analysis import SyntaxValidator, analyze_query, example_for, suggestions_for
from sqlcraft.common.exceptions import SqlCraftError, build_error
from sqlcraft.constants.sql import BUILDABLE_KINDS, Complexity
from sqlcraft.formatting import format_sql
from sqlcraft.logging import get_logger
from sqlcraft.observability.context import request_scope, sanitize_extras
from sqlcraft.operations import BaseQuery
from sqlcraft.parsing import parse_intent
from sqlcraft.query_builder import render_query
from sqlcraft.types.config import QueryBuilderConfig
from sqlcraft.types.results import QueryInfo, ToolResult

logger = get_logger(__name__)

EMPTY_INPUT_MESSAGE = "Please provide input for SQL query generation"
BUILD_FAILED_MESSAGE = "Failed to build SQL query"


def assemble_output(query: str, query_info: QueryInfo, config: QueryBuilderConfig) -> str:
    """Wrap formatted SQL with the optional comment blocks."""
    output = ""

    if config.include_comments:
        output += (
            "-- Generated SQL Query\n"
            f"-- Database: {config.dialect.value.upper()}\n"
            f"-- Type: {config.kind.value.upper()}\n\n"
        )

    output += query

    if config.generate_examples:
        output += "\n\n-- Example Usage:\n"
        output += f"-- {example_for(config.kind)}\n"

    if config.include_comments and query_info.complexity != Complexity.SIMPLE:
        output += "\n\n-- Query Analysis:\n"
        output += f"-- Complexity: {Complexity(query_info.complexity).value}\n"
        output += f"-- Tables: {', '.join(query_info.tables)}\n"
        if query_info.has_joins:
            output += "-- Uses JOINs: Yes\n"
        if query_info.has_subqueries:
            output += "-- Has Subqueries: Yes\n"

    return output


def _error_message(error: Exception) -> str:
    message = getattr(error, "message", None) or str(error)
    return message or BUILD_FAILED_MESSAGE


def process_sql_query_builder(input_text: str, config: QueryBuilderConfig) -> ToolResult:
    """Build, format and analyze a SQL query.

    Args:
        input_text: Intent text (select/insert/update/delete) or raw SQL
            (create/custom)
        config: Complete engine configuration

    Returns:
        ToolResult; ``success`` is false for blank input or when building
        the query raised
    """
    if not input_text or not input_text.strip():
        return ToolResult.failure(EMPTY_INPUT_MESSAGE)

    kind = config.kind
    attributes = {"query_type": kind.value, "database": config.dialect.value}

    with request_scope("sqlcraft.process", attributes=attributes):
        try:
            operation: Optional[BaseQuery] = None
            if kind in BUILDABLE_KINDS:
                operation = parse_intent(input_text, kind)
                query = render_query(operation, config)
            else:
                query = input_text

            formatted_query = format_sql(query, config)
            query_info = analyze_query(formatted_query)
            suggestions = suggestions_for(kind)

            warnings: List[str] = []
            if config.validate_syntax:
                warnings = SyntaxValidator(config.dialect).validate(formatted_query, operation)

            output = assemble_output(formatted_query, query_info, config)
        except Exception as e:
            error = e if isinstance(e, SqlCraftError) else build_error(_error_message(e), cause=e)
            logger.warning(
                "sql_builder.process.failed",
                extra=sanitize_extras({**attributes, "error_code": error.error_code.value}),
                exc_info=True,
            )
            return ToolResult.failure(_error_message(error))

        logger.debug(
            "sql_builder.process.completed",
            extra=sanitize_extras(
                {
                    **attributes,
                    "statement": query_info.type,
                    "complexity": query_info.complexity,
                    "tables": query_info.tables,
                    "warning_count": len(warnings),
                }
            ),
        )

    return ToolResult(
        success=True,
        output=output,
        query=formatted_query,
        query_info=query_info,
        suggestions=suggestions,
        warnings=warnings,
    )
