"""Data Manipulation Language (DML) operations.

This module contains the operation classes for SELECT, INSERT, UPDATE and
DELETE statements built from intent text.
"""

from typing import List, Literal, Optional

from pydantic import Field

from sqlcraft.constants.sql import QueryKind
from sqlcraft.operations.base import BaseQuery, TableQuery


class SelectQuery(BaseQuery):
    """Select data operation.

    Supports:
    - Projection list (empty means ``*``)
    - Raw JOIN clauses, rendered verbatim
    - AND-combined WHERE and HAVING predicates
    - GROUP BY and ORDER BY lists
    - LIMIT/OFFSET
    """
    query_kind: Literal[QueryKind.SELECT] = Field(
        default=QueryKind.SELECT,
        frozen=True
    )

    select: List[str] = Field(default_factory=list)
    from_table: str = Field(default="", alias="from")
    joins: List[str] = Field(default_factory=list)
    where: List[str] = Field(default_factory=list)

    group_by: List[str] = Field(default_factory=list)
    having: List[str] = Field(default_factory=list)
    order_by: List[str] = Field(default_factory=list)

    limit: Optional[int] = Field(default=None)
    offset: Optional[int] = Field(default=None)


class InsertQuery(TableQuery):
    """Insert data operation.

    Each entry of ``values`` is one row tuple of literal or expression
    text. With no rows the builder emits a placeholder tuple.
    """
    query_kind: Literal[QueryKind.INSERT] = Field(
        default=QueryKind.INSERT,
        frozen=True
    )
    columns: List[str] = Field(default_factory=list)
    values: List[List[str]] = Field(default_factory=list)
    on_conflict: Optional[str] = Field(default=None)


class UpdateQuery(TableQuery):
    """Update data operation."""
    query_kind: Literal[QueryKind.UPDATE] = Field(
        default=QueryKind.UPDATE,
        frozen=True
    )
    assignments: List[str] = Field(default_factory=list, alias="set")


class DeleteQuery(TableQuery):
    """Delete data operation."""
    query_kind: Literal[QueryKind.DELETE] = Field(
        default=QueryKind.DELETE,
        frozen=True
    )
