"""Non-fatal syntax validation of rendered SQL.

Validation never fails a request: every finding becomes a warning string
on the result. Syntax is checked by parsing the text with sqlglot in the
target dialect; a few rule checks cover mistakes a parser accepts.
"""

import re
from typing import List, Optional, Union

import sqlglot
from sqlglot.errors import ParseError, TokenError

from sqlcraft.analysis.analyzer import detect_statement_type
from sqlcraft.common.exceptions import SqlCraftError, syntax_error
from sqlcraft.constants.sql import Dialect
from sqlcraft.formatting import strip_comments
from sqlcraft.logging import get_logger
from sqlcraft.observability.context import sanitize_extras
from sqlcraft.operations import BaseQuery, SelectQuery

logger = get_logger(__name__)

_WHERE = re.compile(r"\bWHERE\b", re.IGNORECASE)
_TABLE_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9_]*(?:\.[A-Za-z][A-Za-z0-9_]*)*$")


class SyntaxValidator:
    """Collects warnings about rendered SQL for one dialect.

    Example:
        >>> SyntaxValidator(Dialect.MYSQL).validate("DELETE FROM users")
        ['DELETE without a WHERE clause affects every row']
    """

    def __init__(self, dialect: Union[Dialect, str]):
        self.dialect = Dialect(dialect)

    def check_syntax(self, sql: str) -> None:
        """Parse ``sql`` with sqlglot.

        Raises:
            SqlCraftError: With SYNTAX_ERROR code when sqlglot rejects the text
        """
        read = self.dialect.sqlglot_dialect or None
        try:
            sqlglot.parse(sql, read=read)
        except (ParseError, TokenError) as e:
            lines = str(e).strip().splitlines()
            raise syntax_error(
                lines[0] if lines else "unparseable SQL",
                dialect=self.dialect.value,
                cause=e,
            )

    def validate(self, sql: str, operation: Optional[BaseQuery] = None) -> List[str]:
        """Return warnings for ``sql``.

        Args:
            sql: Rendered SQL text
            operation: Operation the text was built from, when there is one

        Returns:
            Warning messages, empty when nothing was found
        """
        warnings: List[str] = []

        try:
            self.check_syntax(sql)
        except SqlCraftError as e:
            warnings.append(f"Syntax check failed ({self.dialect.value}): {e.message}")

        code = strip_comments(sql).strip()
        statement = detect_statement_type(code)
        if statement in ("UPDATE", "DELETE") and not _WHERE.search(code):
            warnings.append(f"{statement} without a WHERE clause affects every row")

        if operation is not None:
            table = operation.from_table if isinstance(operation, SelectQuery) else operation.table
            if not table:
                warnings.append("No table specified; the query has an empty table name")
            elif not _TABLE_NAME.match(table):
                warnings.append(
                    f"Table name '{table}' is not a plain identifier; consider escaping identifiers"
                )

        if warnings:
            logger.info(
                "validation.warnings_found",
                extra=sanitize_extras({"dialect": self.dialect.value, "warning_count": len(warnings)}),
            )
        return warnings
