"""Dialect-specific identifier quoting."""

from typing import Dict, Tuple, Union

from sqlcraft.constants.sql import Dialect

# Opening and closing quote character per dialect
_QUOTES: Dict[Dialect, Tuple[str, str]] = {
    Dialect.MYSQL: ("`", "`"),
    Dialect.POSTGRESQL: ('"', '"'),
    Dialect.SQLITE: ('"', '"'),
    Dialect.MSSQL: ("[", "]"),
    Dialect.ORACLE: ('"', '"'),
}


def escape_identifier(identifier: str, dialect: Union[Dialect, str]) -> str:
    """Quote an identifier for ``dialect``.

    MySQL uses backticks, PostgreSQL and SQLite double quotes, SQL Server
    brackets and Oracle double quotes around the upper-cased name. Unknown
    and generic dialects leave the identifier untouched, as does an empty
    identifier. An embedded closing quote is doubled.

    Args:
        identifier: Bare identifier text
        dialect: Target dialect (enum member or its value)

    Returns:
        The quoted identifier
    """
    if not identifier:
        return identifier

    try:
        dialect = Dialect(dialect)
    except ValueError:
        return identifier

    quotes = _QUOTES.get(dialect)
    if quotes is None:
        return identifier

    if dialect == Dialect.ORACLE:
        identifier = identifier.upper()

    opening, closing = quotes
    return f"{opening}{identifier.replace(closing, closing * 2)}{closing}"
