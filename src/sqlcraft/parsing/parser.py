"""Line-oriented intent parser.

Turns semi-structured intent text such as::

    table: users
    columns: id, name, email
    where: status = 'active'
    order: name ASC

into a typed operation. Parsing never fails on content: unknown lines are
ignored and missing fields stay empty, so incomplete input surfaces as
incomplete SQL rather than as an error.
"""

import re
from typing import Any, Dict, Iterator, List, Optional, Type, Union

from sqlcraft.common.exceptions import unsupported_query_kind_error
from sqlcraft.constants.sql import QueryKind
from sqlcraft.logging import get_logger
from sqlcraft.operations import BaseQuery, DeleteQuery, InsertQuery, SelectQuery, UpdateQuery
from sqlcraft.parsing.aliases import FIELD_ALIASES, FIELD_MODES, FieldMode, match_alias

logger = get_logger(__name__)

QUERY_MODELS: Dict[QueryKind, Type[BaseQuery]] = {
    QueryKind.SELECT: SelectQuery,
    QueryKind.INSERT: InsertQuery,
    QueryKind.UPDATE: UpdateQuery,
    QueryKind.DELETE: DeleteQuery,
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def split_list(raw: str) -> List[str]:
    """Split a comma separated list, ignoring commas inside parentheses or quotes.

    Every token is trimmed; empty tokens are kept so callers can tell an
    empty list (``[""]``) apart from a real one.
    """
    items: List[str] = []
    current: List[str] = []
    depth = 0
    quote: Optional[str] = None

    for char in raw:
        if quote:
            current.append(char)
            if char == quote:
                quote = None
            continue
        if char in "'\"`":
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif char == "," and depth == 0:
            items.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    items.append("".join(current).strip())
    return items


def parse_leading_int(raw: str) -> Optional[int]:
    """Parse the integer at the start of ``raw`` (``"10 rows"`` -> 10), or None."""
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def _lines(raw_text: str) -> Iterator[str]:
    for line in raw_text.strip().splitlines():
        line = line.strip()
        if line:
            yield line


def _apply(fields: Dict[str, Any], field: str, mode: FieldMode, value: str) -> None:
    if mode == FieldMode.COLUMNS:
        tokens = split_list(value)
        fields[field] = [token for token in tokens if token] if tokens[0] else ["*"]
    elif mode == FieldMode.LIST:
        fields[field] = [token for token in split_list(value) if token]
    elif mode == FieldMode.SCALAR:
        fields[field] = value.strip()
    elif mode == FieldMode.INTEGER:
        fields[field] = parse_leading_int(value)
    elif mode == FieldMode.REPEATED:
        fields.setdefault(field, []).append(value.strip())
    elif mode == FieldMode.ROW:
        row = value.strip()
        if row.startswith("(") and row.endswith(")"):
            fields.setdefault(field, []).append(split_list(row[1:-1]))
        else:
            logger.debug("intent.parser.row_dropped", extra={"row": row})


def parse_intent(raw_text: str, kind: Union[QueryKind, str]) -> BaseQuery:
    """Parse intent text into the operation for ``kind``.

    Args:
        raw_text: Line-oriented intent text
        kind: select, insert, update or delete

    Returns:
        The populated operation; fields without a matching line keep
        their empty defaults

    Raises:
        SqlCraftError: If ``kind`` is not parsed from intent text
    """
    kind = QueryKind(kind)
    aliases = FIELD_ALIASES.get(kind)
    if aliases is None:
        raise unsupported_query_kind_error(kind, "intent parser")

    fields: Dict[str, Any] = {}
    for line in _lines(raw_text):
        alias = match_alias(line, aliases)
        if alias is None:
            logger.debug("intent.parser.line_ignored", extra={"line": line, "query_kind": kind.value})
            continue
        value = line if alias.keep_prefix else line[len(alias.prefix):]
        _apply(fields, alias.field, FIELD_MODES[alias.field], value)

    return QUERY_MODELS[kind](**fields)
