"""Keyword tables used by the keyword normalizer and the formatter.

Dialect keyword sets are additions layered on ``COMMON_KEYWORDS``. All
tables are immutable module-level data.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from sqlcraft.constants.sql import Dialect

COMMON_KEYWORDS: Tuple[str, ...] = (
    "SELECT", "FROM", "WHERE", "JOIN", "INNER", "LEFT", "RIGHT", "FULL",
    "OUTER", "ON", "AND", "OR", "NOT", "IN", "EXISTS", "BETWEEN", "LIKE",
    "IS", "NULL", "ORDER", "BY", "GROUP", "HAVING", "LIMIT", "OFFSET",
    "INSERT", "INTO", "VALUES", "UPDATE", "SET", "DELETE", "CREATE", "TABLE",
    "INDEX", "VIEW", "PROCEDURE", "FUNCTION", "TRIGGER", "DATABASE", "SCHEMA",
)

DIALECT_KEYWORDS: Mapping[Dialect, Tuple[str, ...]] = MappingProxyType({
    Dialect.MYSQL: (
        "AUTO_INCREMENT", "UNSIGNED", "ZEROFILL", "ENGINE", "CHARSET",
        "COLLATE", "DUPLICATE", "KEY", "IGNORE", "REPLACE",
        "ON DUPLICATE KEY UPDATE",
    ),
    Dialect.POSTGRESQL: (
        "SERIAL", "BIGSERIAL", "RETURNING", "UPSERT", "CONFLICT", "EXCLUDED",
        "ILIKE", "SIMILAR TO", "ARRAY", "JSONB", "WINDOW",
    ),
    Dialect.SQLITE: (
        "AUTOINCREMENT", "WITHOUT ROWID", "REPLACE", "ATTACH", "DETACH",
        "VACUUM", "PRAGMA",
    ),
    Dialect.MSSQL: (
        "IDENTITY", "UNIQUEIDENTIFIER", "NVARCHAR", "NTEXT", "TOP", "OUTPUT",
        "MERGE", "CTE", "OVER", "PARTITION BY",
    ),
    Dialect.ORACLE: (
        "SEQUENCE", "NEXTVAL", "CURRVAL", "DUAL", "ROWNUM", "ROWID", "DECODE",
        "NVL", "CONNECT BY", "START WITH",
    ),
    Dialect.GENERIC: (),
})

# Clause anchors that start a new line when formatting
CLAUSE_KEYWORDS: Tuple[str, ...] = (
    "SELECT", "FROM", "WHERE", "JOIN", "INNER JOIN", "LEFT JOIN",
    "RIGHT JOIN", "GROUP BY", "HAVING", "ORDER BY", "LIMIT", "UNION",
)

# Words that can never be a table name captured after FROM/JOIN
RESERVED_TABLE_WORDS = frozenset(
    {"SELECT", "FROM", "WHERE", "JOIN", "GROUP", "HAVING", "ORDER", "LIMIT",
     "OFFSET", "UNION", "ON", "SET", "VALUES", "AND", "OR"}
)


def keywords_for(dialect: Dialect) -> Tuple[str, ...]:
    """Return the common keywords followed by the dialect additions."""
    return COMMON_KEYWORDS + DIALECT_KEYWORDS.get(Dialect(dialect), ())
