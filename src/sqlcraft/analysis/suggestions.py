"""Static improvement tips and example statements per query kind."""

from types import MappingProxyType
from typing import List, Mapping, Tuple, Union

from sqlcraft.constants.sql import QueryKind

SUGGESTIONS: Mapping[QueryKind, Tuple[str, ...]] = MappingProxyType({
    QueryKind.SELECT: (
        "Try adding JOIN clauses for related tables",
        "Consider using aggregate functions like COUNT(), SUM()",
        "Add ORDER BY for sorted results",
        "Use LIMIT to control result size",
    ),
    QueryKind.INSERT: (
        "Use ON DUPLICATE KEY UPDATE for MySQL",
        "Consider batch inserts for better performance",
        "Add RETURNING clause in PostgreSQL",
        "Use parameterized queries to prevent SQL injection",
    ),
    QueryKind.UPDATE: (
        "Always include WHERE clause to avoid updating all rows",
        "Consider JOINs for complex updates",
        "Test with SELECT first to verify conditions",
        "Use LIMIT in MySQL to update specific number of rows",
    ),
    QueryKind.DELETE: (
        "Always include WHERE clause to avoid deleting all rows",
        "Consider soft deletes with UPDATE status",
        "Backup data before bulk deletes",
        "Use LIMIT to delete in batches",
    ),
})

EXAMPLES: Mapping[QueryKind, str] = MappingProxyType({
    QueryKind.SELECT: "SELECT column1, column2 FROM table_name WHERE condition",
    QueryKind.INSERT: "INSERT INTO table_name (column1, column2) VALUES ('value1', 'value2')",
    QueryKind.UPDATE: "UPDATE table_name SET column1 = 'new_value' WHERE id = 1",
    QueryKind.DELETE: "DELETE FROM table_name WHERE condition",
    QueryKind.CREATE: (
        "CREATE TABLE users (id SERIAL PRIMARY KEY, name VARCHAR(255) NOT NULL, "
        "email VARCHAR(255) UNIQUE)"
    ),
})


def suggestions_for(kind: Union[QueryKind, str]) -> List[str]:
    """Return the fixed tips for ``kind``; create and custom have none."""
    return list(SUGGESTIONS.get(QueryKind(kind), ()))


def example_for(kind: Union[QueryKind, str]) -> str:
    """Return the example statement for ``kind``, defaulting to a basic SELECT."""
    return EXAMPLES.get(QueryKind(kind), EXAMPLES[QueryKind.SELECT])
