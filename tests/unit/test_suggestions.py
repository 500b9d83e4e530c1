"""Unit tests for static tips and example statements."""

import pytest

from sqlcraft.analysis import EXAMPLES, example_for, suggestions_for
from sqlcraft.constants.sql import QueryKind


class TestSuggestions:
    """Test the per-kind tip table."""

    @pytest.mark.parametrize(
        "kind", [QueryKind.SELECT, QueryKind.INSERT, QueryKind.UPDATE, QueryKind.DELETE]
    )
    def test_buildable_kinds_have_four_tips(self, kind):
        assert len(suggestions_for(kind)) == 4

    @pytest.mark.parametrize("kind", ["create", "custom"])
    def test_raw_sql_kinds_have_none(self, kind):
        assert suggestions_for(kind) == []

    def test_returns_a_fresh_list(self):
        tips = suggestions_for(QueryKind.SELECT)
        tips.clear()
        assert len(suggestions_for(QueryKind.SELECT)) == 4

    def test_tips_do_not_depend_on_dialect(self):
        assert "Always include WHERE clause to avoid deleting all rows" in suggestions_for("delete")


class TestExamples:
    """Test the example footer statements."""

    def test_example_per_kind(self):
        assert example_for(QueryKind.INSERT).startswith("INSERT INTO table_name")
        assert example_for("create").startswith("CREATE TABLE users")

    def test_custom_falls_back_to_select(self):
        assert example_for(QueryKind.CUSTOM) == EXAMPLES[QueryKind.SELECT]
