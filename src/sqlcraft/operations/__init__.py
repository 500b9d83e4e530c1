"""Database operations module.

Operations are the intermediate representation between the intent parser
and the query builders. They are pure data:
- Produced from intent text by ``sqlcraft.parsing``
- Transformed into SQL by ``sqlcraft.query_builder``
"""

from sqlcraft.operations.base import BaseQuery, TableQuery
from sqlcraft.operations.dml import DeleteQuery, InsertQuery, SelectQuery, UpdateQuery

__all__ = [
    "BaseQuery",
    "TableQuery",
    "SelectQuery",
    "InsertQuery",
    "UpdateQuery",
    "DeleteQuery",
]
