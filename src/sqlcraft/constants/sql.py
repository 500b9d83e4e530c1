"""SQL and query-related constants.

This module contains the fundamental enums shared by every layer of the
engine: the kind of statement being built, the target dialect and the
coarse complexity label produced by the analyzer.

These constants are in Layer 0 and have no dependencies on other
sqlcraft modules.
"""

from enum import Enum


class QueryKind(str, Enum):
    """Statement kind requested by the caller.

    ``SELECT``, ``INSERT``, ``UPDATE`` and ``DELETE`` are synthesized from
    line-oriented intent text. ``CREATE`` and ``CUSTOM`` treat the input as
    raw SQL that is only formatted and analyzed.
    """

    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    CREATE = "create"
    CUSTOM = "custom"

    @property
    def keyword(self) -> str:
        """Leading SQL keyword of statements of this kind."""
        return self.value.upper()


# Kinds that go through the intent parser and query builder
BUILDABLE_KINDS = frozenset(
    {QueryKind.SELECT, QueryKind.INSERT, QueryKind.UPDATE, QueryKind.DELETE}
)


class Dialect(str, Enum):
    """Target SQL database family."""

    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    SQLITE = "sqlite"
    MSSQL = "mssql"
    ORACLE = "oracle"
    GENERIC = "generic"

    @property
    def sqlglot_dialect(self) -> str:
        """Dialect name understood by sqlglot ("" selects its default)."""
        return _SQLGLOT_DIALECTS[self]


_SQLGLOT_DIALECTS = {
    Dialect.MYSQL: "mysql",
    Dialect.POSTGRESQL: "postgres",
    Dialect.SQLITE: "sqlite",
    Dialect.MSSQL: "tsql",
    Dialect.ORACLE: "oracle",
    Dialect.GENERIC: "",
}


class Complexity(str, Enum):
    """Rule-based structural complexity of a query."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"
