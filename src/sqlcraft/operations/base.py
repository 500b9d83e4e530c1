"""Base operation definitions.

Operations are the typed intermediate representation of one statement:
they describe WHAT clauses a query has, independent of how it is
rendered. Query builders turn them into SQL text.
"""

from typing import List

from pydantic import Field

from sqlcraft.constants.sql import QueryKind
from sqlcraft.types.base import SqlCraftBaseModel


class BaseQuery(SqlCraftBaseModel):
    """Base class for all statement operations.

    Attributes:
        query_kind: The kind of statement this operation renders to
    """
    query_kind: QueryKind

    @property
    def kind(self) -> QueryKind:
        return QueryKind(self.query_kind)


class TableQuery(BaseQuery):
    """Operation that targets a single table and may carry joins and filters.

    The table may be empty: a missing ``table:`` line is not an error and
    renders as an empty identifier.
    """
    table: str = Field(default="")
    where: List[str] = Field(default_factory=list)
    joins: List[str] = Field(default_factory=list)
