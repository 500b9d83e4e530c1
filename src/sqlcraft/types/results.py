"""Analysis and result models returned to callers."""

from typing import List, Optional

from pydantic import Field

from sqlcraft.constants.sql import Complexity
from sqlcraft.types.base import SqlCraftBaseModel


class QueryInfo(SqlCraftBaseModel):
    """Static analysis of rendered SQL text.

    Attributes:
        type: Leading statement keyword (SELECT, INSERT, ...) or ``unknown``
        tables: Tables found after FROM and every JOIN, in discovery order
        columns: Reserved, always empty
        has_joins: Text mentions JOIN anywhere
        has_subqueries: A parenthesized SELECT appears in the text
        complexity: Coarse structural label
    """

    type: str = "unknown"
    tables: List[str] = Field(default_factory=list)
    columns: List[str] = Field(default_factory=list)
    has_joins: bool = False
    has_subqueries: bool = False
    complexity: Complexity = Complexity.SIMPLE


class ToolResult(SqlCraftBaseModel):
    """Outcome of one engine invocation.

    ``output``, ``query`` and ``query_info`` are only populated when
    ``success`` is true; ``error`` only when it is false.
    """

    success: bool
    output: Optional[str] = None
    error: Optional[str] = None
    query: Optional[str] = None
    query_info: Optional[QueryInfo] = None
    suggestions: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(success=False, error=message)
