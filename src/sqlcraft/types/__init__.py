"""Shared data models: configuration, analysis results and the base model."""

from sqlcraft.types.base import SqlCraftBaseModel
from sqlcraft.types.config import QueryBuilderConfig
from sqlcraft.types.results import QueryInfo, ToolResult

__all__ = [
    "SqlCraftBaseModel",
    "QueryBuilderConfig",
    "QueryInfo",
    "ToolResult",
]
