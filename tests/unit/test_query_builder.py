"""Unit tests for rendering operations to single-line SQL."""

import pytest

from sqlcraft.common.exceptions import ErrorCode, SqlCraftError
from sqlcraft.constants.sql import Dialect, QueryKind
from sqlcraft.operations import BaseQuery, DeleteQuery, InsertQuery, SelectQuery, UpdateQuery
from sqlcraft.query_builder import PLACEHOLDER_ROW, SQLQueryBuilder, render_query
from sqlcraft.types.config import QueryBuilderConfig


class TestSelectRendering:
    """Test SELECT clause order and omission of empty clauses."""

    def test_minimal_select(self, default_config):
        operation = SelectQuery(select=["id", "name"], from_table="users")
        assert render_query(operation, default_config) == "SELECT id, name FROM users"

    def test_empty_projection_renders_wildcard(self, default_config):
        assert render_query(SelectQuery(from_table="users"), default_config) == "SELECT * FROM users"

    def test_missing_table_keeps_from(self, default_config):
        """Test that a missing table shows up as an empty FROM target."""
        operation = SelectQuery(where=["id = 1"])
        assert render_query(operation, default_config) == "SELECT * FROM  WHERE id = 1"

    def test_canonical_clause_order(self, default_config):
        operation = SelectQuery(
            select=["u.id", "COUNT(o.id)"],
            from_table="users u",
            joins=["LEFT JOIN orders o ON o.user_id = u.id"],
            where=["u.active = 1", "o.total > 10"],
            group_by=["u.id"],
            having=["COUNT(o.id) > 2"],
            order_by=["u.id DESC"],
            limit=10,
            offset=20,
        )

        assert render_query(operation, default_config) == (
            "SELECT u.id, COUNT(o.id) FROM users u "
            "LEFT JOIN orders o ON o.user_id = u.id "
            "WHERE u.active = 1 AND o.total > 10 "
            "GROUP BY u.id HAVING COUNT(o.id) > 2 "
            "ORDER BY u.id DESC LIMIT 10 OFFSET 20"
        )

    @pytest.mark.parametrize("limit", [None, 0])
    def test_absent_or_zero_limit_is_omitted(self, default_config, limit):
        operation = SelectQuery(from_table="t", limit=limit, offset=limit)
        assert render_query(operation, default_config) == "SELECT * FROM t"

    def test_wildcard_first_is_kept_as_is(self, make_config):
        config = make_config(escape_identifiers=True)
        operation = SelectQuery(select=["*", "extra"], from_table="t")
        assert render_query(operation, config) == "SELECT *, extra FROM `t`"


class TestEscapedRendering:
    """Test identifier escaping of identifier-bearing fields."""

    def test_mysql_escaping(self, make_config):
        config = make_config(escape_identifiers=True, database="mysql")
        operation = SelectQuery(
            select=["u.id", "name"],
            from_table="users",
            where=["name = 'x'"],
            order_by=["name DESC"],
        )

        assert render_query(operation, config) == (
            "SELECT `u`.`id`, `name` FROM `users` WHERE name = 'x' ORDER BY `name` DESC"
        )

    def test_expressions_and_aliases_are_not_quoted(self, make_config):
        config = make_config(escape_identifiers=True, database="mssql")
        operation = SelectQuery(select=["COUNT(*)", "t.*"], from_table="users u")

        assert render_query(operation, config) == "SELECT COUNT(*), [t].* FROM users u"

    def test_oracle_upper_cases_names(self, make_config):
        config = make_config(escape_identifiers=True, database="oracle")
        operation = DeleteQuery(table="sessions", where=["id = 1"])

        assert render_query(operation, config) == 'DELETE FROM "SESSIONS" WHERE id = 1'

    def test_empty_table_is_not_quoted(self, make_config):
        config = make_config(escape_identifiers=True, database="postgresql")
        assert render_query(SelectQuery(), config) == "SELECT * FROM "


class TestInsertRendering:
    """Test INSERT rendering."""

    def test_explicit_values(self, default_config):
        operation = InsertQuery(
            table="products",
            columns=["name", "price"],
            values=[["'Mouse'", "29.99"]],
        )

        assert render_query(operation, default_config) == (
            "INSERT INTO products (name, price) VALUES ('Mouse', 29.99)"
        )

    def test_multiple_rows(self, default_config):
        operation = InsertQuery(table="t", columns=["a"], values=[["1"], ["2"]])
        assert render_query(operation, default_config) == "INSERT INTO t (a) VALUES (1), (2)"

    def test_placeholder_without_rows(self, default_config):
        operation = InsertQuery(table="t", columns=["a", "b", "c"])
        assert render_query(operation, default_config) == f"INSERT INTO t (a, b, c) VALUES {PLACEHOLDER_ROW}"

    def test_conflict_clause_is_appended(self, default_config):
        operation = InsertQuery(
            table="users",
            columns=["id"],
            values=[["1"]],
            on_conflict="ON CONFLICT (id) DO NOTHING",
        )

        assert render_query(operation, default_config) == (
            "INSERT INTO users (id) VALUES (1) ON CONFLICT (id) DO NOTHING"
        )


class TestUpdateDeleteRendering:
    """Test UPDATE and DELETE rendering."""

    def test_update(self, default_config):
        operation = UpdateQuery(
            table="users",
            assignments=["status = 'inactive'", "score = 0"],
            where=["id = 7"],
        )

        assert render_query(operation, default_config) == (
            "UPDATE users SET status = 'inactive', score = 0 WHERE id = 7"
        )

    def test_update_accepts_set_alias(self, default_config):
        operation = UpdateQuery(**{"table": "t", "set": ["a = 1"]})
        assert render_query(operation, default_config) == "UPDATE t SET a = 1"

    def test_delete_with_join(self, default_config):
        operation = DeleteQuery(
            table="orders",
            joins=["JOIN users u ON u.id = orders.user_id"],
            where=["u.banned = 1"],
        )

        assert render_query(operation, default_config) == (
            "DELETE FROM orders JOIN users u ON u.id = orders.user_id WHERE u.banned = 1"
        )


class TestBuilderDispatch:
    """Test operation dispatch in the base builder."""

    def test_unsupported_kind_raises(self, default_config):
        builder = SQLQueryBuilder(default_config)

        with pytest.raises(SqlCraftError) as exc_info:
            builder.build_query(BaseQuery(query_kind=QueryKind.CUSTOM))

        assert exc_info.value.error_code == ErrorCode.UNSUPPORTED_QUERY_KIND
        assert "SQLQueryBuilder" in exc_info.value.message

    def test_builder_reads_dialect_from_config(self):
        builder = SQLQueryBuilder(QueryBuilderConfig(database="sqlite", escape_identifiers=True))

        assert builder.dialect == Dialect.SQLITE
        assert builder.quote_name("main.users") == '"main"."users"'
