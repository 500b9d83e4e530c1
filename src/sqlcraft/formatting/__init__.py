"""SQL keyword casing and line-oriented formatting."""

from sqlcraft.formatting.formatter import LOGICAL_INDENT, format_sql, normalize_keywords, strip_comments

__all__ = [
    "LOGICAL_INDENT",
    "format_sql",
    "normalize_keywords",
    "strip_comments",
]
