from sqlcraft.__version__ import __version__

from sqlcraft.constants import Complexity, Dialect, QueryKind
from sqlcraft.types import QueryBuilderConfig, QueryInfo, ToolResult
from sqlcraft.engine import process_sql_query_builder

from sqlcraft.parsing import parse_intent
from sqlcraft.query_builder import SQLQueryBuilder, escape_identifier, render_query
from sqlcraft.formatting import format_sql, normalize_keywords
from sqlcraft.analysis import SyntaxValidator, analyze_query, example_for, suggestions_for

from sqlcraft.common.exceptions import ErrorCode, SqlCraftError


__all__ = [
    "__version__",

    # Entry point
    "process_sql_query_builder",

    # Models and enums
    "QueryBuilderConfig",
    "QueryInfo",
    "ToolResult",
    "QueryKind",
    "Dialect",
    "Complexity",

    # Pipeline stages
    "parse_intent",
    "SQLQueryBuilder",
    "render_query",
    "escape_identifier",
    "format_sql",
    "normalize_keywords",
    "analyze_query",
    "suggestions_for",
    "example_for",
    "SyntaxValidator",

    # Exceptions (public API)
    "SqlCraftError",
    "ErrorCode",
]
