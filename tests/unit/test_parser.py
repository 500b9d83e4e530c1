"""Unit tests for the line-oriented intent parser."""

import pytest

from sqlcraft.common.exceptions import ErrorCode, SqlCraftError
from sqlcraft.constants.sql import QueryKind
from sqlcraft.operations import DeleteQuery, InsertQuery, SelectQuery, UpdateQuery
from sqlcraft.parsing import FIELD_ALIASES, match_alias, parse_intent
from sqlcraft.parsing.parser import parse_leading_int, split_list


class TestSplitList:
    """Test comma splitting of list-valued fields."""

    def test_trims_tokens(self):
        assert split_list(" id ,name,  email ") == ["id", "name", "email"]

    def test_ignores_commas_in_parentheses_and_quotes(self):
        """Test that function arguments and string literals stay whole."""
        assert split_list("a, COALESCE(b, 0), 'x,y'") == ["a", "COALESCE(b, 0)", "'x,y'"]

    def test_keeps_empty_tokens(self):
        assert split_list("") == [""]
        assert split_list("a,,b") == ["a", "", "b"]


class TestParseLeadingInt:
    """Test integer parsing of limit and offset values."""

    @pytest.mark.parametrize(
        "raw, expected",
        [("10", 10), (" 25 rows", 25), ("abc", None), ("", None), ("7.5", 7)],
    )
    def test_leading_integer(self, raw, expected):
        assert parse_leading_int(raw) == expected


class TestAliasTable:
    """Test the alias table as data."""

    def test_every_buildable_kind_has_aliases(self):
        assert set(FIELD_ALIASES) == {
            QueryKind.SELECT, QueryKind.INSERT, QueryKind.UPDATE, QueryKind.DELETE
        }

    def test_first_matching_prefix_wins(self):
        """Test that 'order by:' is picked before the shorter 'order by '."""
        alias = match_alias("ORDER BY: name", FIELD_ALIASES[QueryKind.SELECT])
        assert alias.prefix == "order by:"
        assert alias.field == "order_by"

    def test_unmatched_line(self):
        assert match_alias("nonsense here", FIELD_ALIASES[QueryKind.SELECT]) is None


class TestParseSelect:
    """Test SELECT intent parsing."""

    def test_basic_select(self):
        """Test the common table/columns/where/order form."""
        text = (
            "table: users\n"
            "columns: id, name, email\n"
            "where: status = 'active'\n"
            "order: name ASC\n"
        )
        operation = parse_intent(text, QueryKind.SELECT)

        assert isinstance(operation, SelectQuery)
        assert operation.from_table == "users"
        assert operation.select == ["id", "name", "email"]
        assert operation.where == ["status = 'active'"]
        assert operation.order_by == ["name ASC"]

    def test_prefixes_are_case_insensitive(self):
        operation = parse_intent("TABLE: users\nSELECT id", "select")

        assert operation.from_table == "users"
        assert operation.select == ["id"]

    def test_keyword_prefix_forms(self):
        """Test the SQL-like spellings without colons."""
        text = "select id\nfrom users\nwhere id > 1\ngroup by id\nlimit 5\noffset 10"
        operation = parse_intent(text, "select")

        assert operation.select == ["id"]
        assert operation.from_table == "users"
        assert operation.where == ["id > 1"]
        assert operation.group_by == ["id"]
        assert operation.limit == 5
        assert operation.offset == 10

    def test_from_colon_alias(self):
        operation = parse_intent("from: users\ncolumns: id", "select")
        assert operation.from_table == "users"

    def test_empty_columns_becomes_wildcard(self):
        operation = parse_intent("table: users\ncolumns:", "select")
        assert operation.select == ["*"]

    def test_where_lines_accumulate_in_order(self):
        text = "table: t\nwhere: a = 1\nwhere: b = 2\nconditions: c = 3"
        operation = parse_intent(text, "select")
        assert operation.where == ["a = 1", "b = 2", "c = 3"]

    def test_join_lines_keep_their_keyword(self):
        """Test that raw join clauses are stored verbatim."""
        text = (
            "table: users u\n"
            "LEFT JOIN orders o ON o.user_id = u.id\n"
            "joins: INNER JOIN items i ON i.order_id = o.id"
        )
        operation = parse_intent(text, "select")

        assert operation.joins == [
            "LEFT JOIN orders o ON o.user_id = u.id",
            "INNER JOIN items i ON i.order_id = o.id",
        ]

    def test_having_and_group(self):
        text = "table: orders\ncolumns: user_id, COUNT(*)\ngroup: user_id\nhaving: COUNT(*) > 3"
        operation = parse_intent(text, "select")

        assert operation.select == ["user_id", "COUNT(*)"]
        assert operation.group_by == ["user_id"]
        assert operation.having == ["COUNT(*) > 3"]

    def test_unparseable_limit_is_none(self):
        operation = parse_intent("table: t\nlimit: many", "select")
        assert operation.limit is None

    def test_unknown_lines_are_ignored(self):
        operation = parse_intent("please build me a query\ntable: users", "select")
        assert operation.from_table == "users"
        assert operation.select == []

    def test_missing_table_is_not_an_error(self):
        operation = parse_intent("where: id = 1", "select")
        assert operation.from_table == ""


class TestParseInsert:
    """Test INSERT intent parsing."""

    def test_values_rows(self):
        text = (
            "table: products\n"
            "columns: name, price\n"
            "values: ('Mouse', 29.99)\n"
            "values: ('Keyboard, wireless', 49.5)"
        )
        operation = parse_intent(text, "insert")

        assert isinstance(operation, InsertQuery)
        assert operation.table == "products"
        assert operation.columns == ["name", "price"]
        assert operation.values == [["'Mouse'", "29.99"], ["'Keyboard, wireless'", "49.5"]]

    def test_unparenthesized_values_are_dropped(self):
        operation = parse_intent("table: products\nvalues: 'Mouse', 29.99", "insert")
        assert operation.values == []

    def test_conflict_clause(self):
        text = "into users\ncolumns: id\nvalues: (1)\nON CONFLICT (id) DO NOTHING"
        operation = parse_intent(text, "insert")

        assert operation.table == "users"
        assert operation.on_conflict == "ON CONFLICT (id) DO NOTHING"


class TestParseUpdateDelete:
    """Test UPDATE and DELETE intent parsing."""

    def test_update_assignments(self):
        text = "update users\nset: status = 'inactive'\nset last_seen = NOW()\nwhere: id = 7"
        operation = parse_intent(text, "update")

        assert isinstance(operation, UpdateQuery)
        assert operation.table == "users"
        assert operation.assignments == ["status = 'inactive'", "last_seen = NOW()"]
        assert operation.where == ["id = 7"]

    def test_delete(self):
        operation = parse_intent("delete from sessions\nwhere: expires_at < NOW()", "delete")

        assert isinstance(operation, DeleteQuery)
        assert operation.table == "sessions"
        assert operation.where == ["expires_at < NOW()"]

    def test_delete_from_colon_alias(self):
        operation = parse_intent("from: sessions\nwhere: id = 1", "delete")
        assert operation.table == "sessions"


class TestUnsupportedKinds:
    """Test kinds that take raw SQL instead of intent text."""

    @pytest.mark.parametrize("kind", [QueryKind.CREATE, QueryKind.CUSTOM])
    def test_raises_unsupported_kind(self, kind):
        with pytest.raises(SqlCraftError) as exc_info:
            parse_intent("table: users", kind)

        assert exc_info.value.error_code == ErrorCode.UNSUPPORTED_QUERY_KIND
