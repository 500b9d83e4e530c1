"""Per-invocation configuration of the query builder engine."""

from pydantic import ConfigDict, Field

from sqlcraft.constants.sql import Dialect, QueryKind
from sqlcraft.types.base import SqlCraftBaseModel


class QueryBuilderConfig(SqlCraftBaseModel):
    """Immutable configuration consumed by ``process_sql_query_builder``.

    Defaults mirror the values the interactive tool starts with, so callers
    may pass only the fields they care about. Fields accept both their
    Python names and the camelCase spellings (``queryType``, ``indentSize``).
    """
    model_config = ConfigDict(frozen=True)

    query_type: QueryKind = Field(default=QueryKind.SELECT)
    database: Dialect = Field(default=Dialect.MYSQL)
    format_output: bool = Field(default=True)
    include_comments: bool = Field(default=True)
    validate_syntax: bool = Field(
        default=True,
        description="Collect non-fatal warnings (sqlglot parse, missing WHERE, odd table names)",
    )
    generate_examples: bool = Field(default=False)
    escape_identifiers: bool = Field(default=False)
    uppercase_keywords: bool = Field(default=True)
    indent_size: int = Field(default=2, ge=1, description="Spaces per comma continuation")

    @property
    def kind(self) -> QueryKind:
        return QueryKind(self.query_type)

    @property
    def dialect(self) -> Dialect:
        return Dialect(self.database)
