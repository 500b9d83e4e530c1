import re
from abc import ABC, abstractmethod
from typing import List

from sqlcraft.common.exceptions import unsupported_query_kind_error
from sqlcraft.constants.sql import QueryKind
from sqlcraft.operations import BaseQuery, DeleteQuery, InsertQuery, SelectQuery, UpdateQuery
from sqlcraft.query_builder.escaping import escape_identifier
from sqlcraft.types.config import QueryBuilderConfig

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_ORDER_SUFFIX = re.compile(r"^(.*?)(\s+(?:ASC|DESC)(?:\s+NULLS\s+(?:FIRST|LAST))?)$", re.IGNORECASE)


class BaseQueryBuilder(ABC):
    """Base interface for query builders.

    Query builders turn operations into single-line SQL text for the
    dialect named in the config. They never execute or validate queries.

    Identifier-bearing fields (tables, column lists) go through
    :meth:`quote_identifier`; predicate and join text is caller-supplied
    SQL and is emitted verbatim.
    """

    def __init__(self, config: QueryBuilderConfig):
        self.config = config
        self.dialect = config.dialect
        self.escape = config.escape_identifiers

    @abstractmethod
    def _build_select(self, operation: SelectQuery) -> str:
        """Build SELECT statement."""
        pass

    @abstractmethod
    def _build_insert(self, operation: InsertQuery) -> str:
        """Build INSERT statement."""
        pass

    @abstractmethod
    def _build_update(self, operation: UpdateQuery) -> str:
        """Build UPDATE statement."""
        pass

    @abstractmethod
    def _build_delete(self, operation: DeleteQuery) -> str:
        """Build DELETE statement."""
        pass

    def build_query(self, operation: BaseQuery) -> str:
        """Build SQL query from operation.

        Args:
            operation: Operation to convert to SQL

        Returns:
            Single-line SQL text

        Raises:
            SqlCraftError: If the operation kind has no renderer
        """
        operation_mapping = {
            QueryKind.SELECT: self._build_select,
            QueryKind.INSERT: self._build_insert,
            QueryKind.UPDATE: self._build_update,
            QueryKind.DELETE: self._build_delete,
        }

        builder_method = operation_mapping.get(QueryKind(operation.query_kind))
        if builder_method:
            return builder_method(operation)

        raise unsupported_query_kind_error(operation.query_kind, self.__class__.__name__)

    def quote_identifier(self, identifier: str) -> str:
        """Quote one bare identifier when escaping is enabled."""
        if not self.escape:
            return identifier
        return escape_identifier(identifier, self.dialect)

    def quote_name(self, name: str) -> str:
        """Quote a possibly dotted name (``schema.table``, ``t.col``, ``t.*``).

        Anything that is not a plain dotted identifier (``*``, expressions,
        aliased names) is returned unchanged.
        """
        if not self.escape or not name:
            return name

        parts = name.split(".")
        if parts[-1] == "*" and len(parts) > 1:
            head, tail = parts[:-1], ["*"]
        else:
            head, tail = parts, []

        if not all(_IDENTIFIER.match(part) for part in head):
            return name
        return ".".join([self.quote_identifier(part) for part in head] + tail)

    def format_column_list(self, columns: List[str]) -> str:
        """Format a list of columns for SQL."""
        return ", ".join(self.quote_name(col) for col in columns)

    def format_order_list(self, terms: List[str]) -> str:
        """Format ORDER BY terms, keeping direction keywords outside the quotes."""
        formatted = []
        for term in terms:
            match = _ORDER_SUFFIX.match(term)
            if match:
                formatted.append(f"{self.quote_name(match.group(1))}{match.group(2)}")
            else:
                formatted.append(self.quote_name(term))
        return ", ".join(formatted)

    def format_conditions(self, predicates: List[str]) -> str:
        """Join predicates conjunctively."""
        return " AND ".join(predicates)
