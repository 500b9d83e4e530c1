"""Static analysis of rendered SQL text.

The analyzer looks only at text, never at operations, so raw SQL passed
through in custom mode is covered the same way as generated queries.
Comments are ignored. Detection is pattern based and deliberately
approximate.
"""

import re
from typing import List, Optional

from sqlcraft.constants.keywords import RESERVED_TABLE_WORDS
from sqlcraft.constants.sql import Complexity
from sqlcraft.formatting import strip_comments
from sqlcraft.types.results import QueryInfo

STATEMENT_KEYWORDS = ("SELECT", "INSERT", "UPDATE", "DELETE", "CREATE")

_TABLE_NAME = r"""\s+[`"\[]?([A-Za-z_][A-Za-z0-9_]*)"""
_FROM_TABLE = re.compile(r"FROM" + _TABLE_NAME, re.IGNORECASE)
_JOIN_TABLE = re.compile(r"JOIN" + _TABLE_NAME, re.IGNORECASE)
_SUBQUERY = re.compile(r"\(\s*SELECT\b", re.IGNORECASE)
_AGGREGATION = re.compile(r"\b(?:COUNT|SUM|AVG|MIN|MAX)\b|\bGROUP\s+BY\b", re.IGNORECASE)
_WINDOW_FUNCTION = re.compile(r"OVER\s*\(", re.IGNORECASE)


def detect_statement_type(sql: str) -> str:
    """Return the statement keyword the text starts with, or ``unknown``."""
    upper = sql.upper()
    for keyword in STATEMENT_KEYWORDS:
        if upper.startswith(keyword):
            return keyword
    return "unknown"


def _table_name(match: Optional["re.Match"]) -> Optional[str]:
    if match is None:
        return None
    name = match.group(1)
    return None if name.upper() in RESERVED_TABLE_WORDS else name


def extract_tables(sql: str) -> List[str]:
    """Tables named after the first FROM and after every JOIN, in order.

    Duplicates are kept.
    """
    tables: List[str] = []

    from_table = _table_name(_FROM_TABLE.search(sql))
    if from_table:
        tables.append(from_table)

    for match in _JOIN_TABLE.finditer(sql):
        join_table = _table_name(match)
        if join_table:
            tables.append(join_table)

    return tables


def classify_complexity(
    has_joins: bool,
    has_subqueries: bool,
    has_aggregation: bool,
    has_window_functions: bool,
) -> Complexity:
    """Map detected features to a complexity label."""
    if has_window_functions or (has_joins and has_subqueries):
        return Complexity.COMPLEX
    if has_joins or has_subqueries or has_aggregation:
        return Complexity.MODERATE
    return Complexity.SIMPLE


def analyze_query(sql: str) -> QueryInfo:
    """Analyze rendered SQL.

    Args:
        sql: Rendered (and possibly formatted) SQL text

    Returns:
        QueryInfo with statement type, tables, join/subquery flags and
        complexity. ``columns`` is reserved and always empty.
    """
    sql = strip_comments(sql).strip()
    has_joins = "JOIN" in sql.upper()
    has_subqueries = bool(_SUBQUERY.search(sql))

    return QueryInfo(
        type=detect_statement_type(sql),
        tables=extract_tables(sql),
        columns=[],
        has_joins=has_joins,
        has_subqueries=has_subqueries,
        complexity=classify_complexity(
            has_joins=has_joins,
            has_subqueries=has_subqueries,
            has_aggregation=bool(_AGGREGATION.search(sql)),
            has_window_functions=bool(_WINDOW_FUNCTION.search(sql)),
        ),
    )
