"""Constants module for sqlcraft.

This module contains the constant values and enumerations used throughout
the engine. As Layer 0 in the architecture, it has no dependencies on
other sqlcraft modules.

Organization:
    - sql: query kind, dialect and complexity enums
    - keywords: keyword tables for casing and formatting
"""

from sqlcraft.constants.sql import BUILDABLE_KINDS, Complexity, Dialect, QueryKind
from sqlcraft.constants.keywords import (
    CLAUSE_KEYWORDS,
    COMMON_KEYWORDS,
    DIALECT_KEYWORDS,
    RESERVED_TABLE_WORDS,
    keywords_for,
)

__all__ = [
    # SQL
    "QueryKind",
    "Dialect",
    "Complexity",
    "BUILDABLE_KINDS",
    # Keywords
    "COMMON_KEYWORDS",
    "DIALECT_KEYWORDS",
    "CLAUSE_KEYWORDS",
    "RESERVED_TABLE_WORDS",
    "keywords_for",
]
