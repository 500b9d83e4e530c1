"""Standard query builder shared by all supported dialects.

Clause order follows canonical SQL. Dialects differ only in identifier
quoting, which the base class resolves from the config.
"""

from sqlcraft.operations import BaseQuery, DeleteQuery, InsertQuery, SelectQuery, UpdateQuery
from sqlcraft.query_builder.base import BaseQueryBuilder
from sqlcraft.types.config import QueryBuilderConfig

# Emitted when no value rows were parsed; marks the statement as incomplete
PLACEHOLDER_ROW = "(?, ?, ?)"


class SQLQueryBuilder(BaseQueryBuilder):
    """Renders operations to single-line SQL.

    Example:
        >>> builder = SQLQueryBuilder(QueryBuilderConfig(escape_identifiers=True))
        >>> builder.build_query(SelectQuery(select=["id"], from_table="users"))
        'SELECT `id` FROM `users`'
    """

    def _build_select(self, operation: SelectQuery) -> str:
        if not operation.select:
            projection = "*"
        elif operation.select[0] == "*":
            projection = ", ".join(operation.select)
        else:
            projection = self.format_column_list(operation.select)

        # FROM is always emitted so a missing table stays visible
        sql = f"SELECT {projection} FROM {self.quote_name(operation.from_table)}"

        for join in operation.joins:
            sql += f" {join}"

        if operation.where:
            sql += f" WHERE {self.format_conditions(operation.where)}"

        if operation.group_by:
            sql += f" GROUP BY {self.format_column_list(operation.group_by)}"

        if operation.having:
            sql += f" HAVING {self.format_conditions(operation.having)}"

        if operation.order_by:
            sql += f" ORDER BY {self.format_order_list(operation.order_by)}"

        if operation.limit:
            sql += f" LIMIT {operation.limit}"

        if operation.offset:
            sql += f" OFFSET {operation.offset}"

        return sql

    def _build_insert(self, operation: InsertQuery) -> str:
        sql = f"INSERT INTO {self.quote_name(operation.table)}"

        if operation.columns:
            sql += f" ({self.format_column_list(operation.columns)})"

        sql += " VALUES "
        if operation.values:
            sql += ", ".join(f"({', '.join(row)})" for row in operation.values)
        else:
            sql += PLACEHOLDER_ROW

        if operation.on_conflict:
            sql += f" {operation.on_conflict}"

        return sql

    def _build_update(self, operation: UpdateQuery) -> str:
        sql = f"UPDATE {self.quote_name(operation.table)}"

        for join in operation.joins:
            sql += f" {join}"

        if operation.assignments:
            sql += f" SET {', '.join(operation.assignments)}"

        if operation.where:
            sql += f" WHERE {self.format_conditions(operation.where)}"

        return sql

    def _build_delete(self, operation: DeleteQuery) -> str:
        sql = f"DELETE FROM {self.quote_name(operation.table)}"

        for join in operation.joins:
            sql += f" {join}"

        if operation.where:
            sql += f" WHERE {self.format_conditions(operation.where)}"

        return sql


def render_query(operation: BaseQuery, config: QueryBuilderConfig) -> str:
    """Render ``operation`` to single-line SQL with a builder for ``config``."""
    return SQLQueryBuilder(config).build_query(operation)
