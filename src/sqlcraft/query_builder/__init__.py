"""Query builder module for SQL generation across dialects.

Query builders translate operations into SQL text; they do NOT execute
or validate it.

Architecture:
    - escaping.py: dialect identifier quoting (pure function)
    - base.py: abstract builder with dispatch and shared formatting helpers
    - standard.py: clause rendering shared by every dialect

Example:
    >>> from sqlcraft.query_builder import render_query
    >>> from sqlcraft.operations import InsertQuery
    >>> from sqlcraft.types import QueryBuilderConfig
    >>> render_query(
    ...     InsertQuery(table="products", columns=["name", "price"], values=[["'Mouse'", "29.99"]]),
    ...     QueryBuilderConfig(),
    ... )
    "INSERT INTO products (name, price) VALUES ('Mouse', 29.99)"
"""

from sqlcraft.query_builder.base import BaseQueryBuilder
from sqlcraft.query_builder.escaping import escape_identifier
from sqlcraft.query_builder.standard import PLACEHOLDER_ROW, SQLQueryBuilder, render_query

__all__ = [
    "BaseQueryBuilder",
    "SQLQueryBuilder",
    "PLACEHOLDER_ROW",
    "escape_identifier",
    "render_query",
]
