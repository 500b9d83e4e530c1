"""Keyword normalization and line-oriented SQL formatting.

Both passes work on the text outside quoted literals, quoted identifiers
and comments, so string contents and comment text are never re-cased or
reflowed. Formatting is idempotent: every break rule replaces the
whitespace in front of its anchor instead of adding to it.
"""

import re
from functools import lru_cache
from typing import Callable, List, Pattern, Union

from sqlcraft.constants.keywords import CLAUSE_KEYWORDS, keywords_for
from sqlcraft.constants.sql import Dialect
from sqlcraft.types.config import QueryBuilderConfig

# Segments never re-cased or reflowed: quoted strings (with doubled-quote
# and backslash escapes), quoted or bracketed identifiers, and comments
_PROTECTED = re.compile(
    r"""('(?:[^'\\]|\\[\s\S]|'')*'"""
    r'''|"(?:[^"\\]|\\[\s\S]|"")*"'''
    r"""|`[^`]*`|\[[^\]]*\]"""
    r"""|--[^\n]*|/\*[\s\S]*?\*/)"""
)

# Qualified joins break as one unit
_JOIN = r"(?:(?:INNER|LEFT|RIGHT|FULL|CROSS)\s+(?:OUTER\s+)?)?JOIN"

_CLAUSE_BREAK = re.compile(
    r"\s*\b("
    + "|".join(
        [_JOIN]
        + [r"\s+".join(keyword.split()) for keyword in CLAUSE_KEYWORDS if "JOIN" not in keyword]
    )
    + r")\b",
    re.IGNORECASE,
)

_LOGICAL_BREAK = re.compile(r"\s*\b(AND|OR)\b", re.IGNORECASE)

# AND/OR continuation indent is fixed, independent of indent_size
LOGICAL_INDENT = "  "


def _map_outside_literals(sql: str, transform: Callable[[str], str]) -> str:
    parts = _PROTECTED.split(sql)
    parts[::2] = [transform(part) for part in parts[::2]]
    return "".join(parts)


def strip_comments(sql: str) -> str:
    """Replace every ``--`` and ``/* */`` comment with a single space.

    Quoted strings and identifiers that merely contain comment markers
    are left intact.
    """
    return _PROTECTED.sub(
        lambda m: " " if m.group(0).startswith(("--", "/*")) else m.group(0),
        sql,
    )


@lru_cache(maxsize=None)
def _keyword_pattern(dialect: Dialect) -> Pattern:
    keywords = sorted(set(keywords_for(dialect)), key=len, reverse=True)
    alternation = "|".join(r"\s+".join(map(re.escape, keyword.split())) for keyword in keywords)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def normalize_keywords(sql: str, dialect: Union[Dialect, str]) -> str:
    """Upper-case every common and dialect keyword appearing as a whole word.

    Args:
        sql: SQL text
        dialect: Dialect whose keyword additions apply

    Returns:
        SQL text with keywords in canonical upper case
    """
    pattern = _keyword_pattern(Dialect(dialect))
    return _map_outside_literals(sql, lambda part: pattern.sub(lambda m: m.group(0).upper(), part))


def _break_top_level_commas(sql: str, indent: str) -> str:
    parts = _PROTECTED.split(sql)
    depth = 0
    for index in range(0, len(parts), 2):
        part = parts[index]
        chars: List[str] = []
        position = 0
        while position < len(part):
            char = part[position]
            if char == "(":
                depth += 1
            elif char == ")":
                depth = max(depth - 1, 0)
            elif char == "," and depth == 0:
                chars.append(",\n" + indent)
                position += 1
                while position < len(part) and part[position].isspace():
                    position += 1
                continue
            chars.append(char)
            position += 1
        parts[index] = "".join(chars)
    return "".join(parts)


def format_sql(sql: str, config: QueryBuilderConfig) -> str:
    """Reflow single-line SQL into indented multi-line text.

    Does nothing unless ``config.format_output`` is set. Keyword casing
    only runs with ``config.uppercase_keywords``; line breaks are always
    applied: before each major clause keyword, after each top-level comma
    (continuation indented by ``indent_size`` spaces) and before every
    AND/OR (two-space hanging indent).

    Args:
        sql: SQL text, usually a single line
        config: Engine configuration

    Returns:
        Formatted SQL, trimmed of surrounding whitespace
    """
    if not config.format_output:
        return sql

    formatted = sql
    if config.uppercase_keywords:
        formatted = normalize_keywords(formatted, config.dialect)

    formatted = _map_outside_literals(
        formatted, lambda part: _CLAUSE_BREAK.sub(lambda m: "\n" + m.group(1), part)
    )
    formatted = _break_top_level_commas(formatted, " " * config.indent_size)
    formatted = _map_outside_literals(
        formatted, lambda part: _LOGICAL_BREAK.sub(lambda m: "\n" + LOGICAL_INDENT + m.group(1), part)
    )
    return formatted.strip()
