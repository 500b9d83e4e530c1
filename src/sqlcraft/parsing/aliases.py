"""Field alias table of the line-oriented intent grammar.

Every intent line is classified by a case-insensitive prefix test against
an ordered list of ``FieldAlias`` entries for the requested query kind;
the first matching prefix wins. ``FIELD_MODES`` says how the text after
the prefix is folded into the operation field.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

from sqlcraft.constants.sql import QueryKind


class FieldMode(str, Enum):
    """How a matched line contributes to its field."""

    COLUMNS = "columns"    # comma list, empty first token means "*"
    LIST = "list"          # comma list, replaces any earlier value
    SCALAR = "scalar"      # trimmed text, replaces any earlier value
    INTEGER = "integer"    # leading integer, None when absent
    REPEATED = "repeated"  # one entry per matching line
    ROW = "row"            # one parenthesized value tuple per line


class FieldAlias(NamedTuple):
    """One accepted line prefix for an operation field.

    Attributes:
        prefix: Lower-case line prefix, including its ``:`` or trailing space
        field: Operation field the line populates
        keep_prefix: Keep the whole line as the value (raw clause keywords)
    """
    prefix: str
    field: str
    keep_prefix: bool = False


FIELD_MODES: Mapping[str, FieldMode] = MappingProxyType({
    "select": FieldMode.COLUMNS,
    "from_table": FieldMode.SCALAR,
    "table": FieldMode.SCALAR,
    "columns": FieldMode.LIST,
    "group_by": FieldMode.LIST,
    "order_by": FieldMode.LIST,
    "where": FieldMode.REPEATED,
    "having": FieldMode.REPEATED,
    "joins": FieldMode.REPEATED,
    "assignments": FieldMode.REPEATED,
    "limit": FieldMode.INTEGER,
    "offset": FieldMode.INTEGER,
    "values": FieldMode.ROW,
    "on_conflict": FieldMode.SCALAR,
})

_WHERE_ALIASES = (
    FieldAlias("where:", "where"),
    FieldAlias("where ", "where"),
    FieldAlias("conditions:", "where"),
)

_JOIN_ALIASES = (
    FieldAlias("joins:", "joins"),
    FieldAlias("join:", "joins"),
    FieldAlias("join ", "joins", keep_prefix=True),
    FieldAlias("inner join ", "joins", keep_prefix=True),
    FieldAlias("left join ", "joins", keep_prefix=True),
    FieldAlias("left outer join ", "joins", keep_prefix=True),
    FieldAlias("right join ", "joins", keep_prefix=True),
    FieldAlias("right outer join ", "joins", keep_prefix=True),
    FieldAlias("full join ", "joins", keep_prefix=True),
    FieldAlias("full outer join ", "joins", keep_prefix=True),
    FieldAlias("cross join ", "joins", keep_prefix=True),
)

FIELD_ALIASES: Mapping[QueryKind, Tuple[FieldAlias, ...]] = MappingProxyType({
    QueryKind.SELECT: (
        FieldAlias("select ", "select"),
        FieldAlias("columns:", "select"),
        FieldAlias("from:", "from_table"),
        FieldAlias("from ", "from_table"),
        FieldAlias("table:", "from_table"),
        *_WHERE_ALIASES,
        *_JOIN_ALIASES,
        FieldAlias("group by:", "group_by"),
        FieldAlias("group by ", "group_by"),
        FieldAlias("group:", "group_by"),
        FieldAlias("having:", "having"),
        FieldAlias("having ", "having"),
        FieldAlias("order by:", "order_by"),
        FieldAlias("order by ", "order_by"),
        FieldAlias("order:", "order_by"),
        FieldAlias("limit:", "limit"),
        FieldAlias("limit ", "limit"),
        FieldAlias("offset:", "offset"),
        FieldAlias("offset ", "offset"),
    ),
    QueryKind.INSERT: (
        FieldAlias("table:", "table"),
        FieldAlias("insert into ", "table"),
        FieldAlias("into ", "table"),
        FieldAlias("columns:", "columns"),
        FieldAlias("values:", "values"),
        FieldAlias("conflict:", "on_conflict"),
        FieldAlias("on conflict ", "on_conflict", keep_prefix=True),
        FieldAlias("on duplicate key update ", "on_conflict", keep_prefix=True),
    ),
    QueryKind.UPDATE: (
        FieldAlias("table:", "table"),
        FieldAlias("update ", "table"),
        FieldAlias("set:", "assignments"),
        FieldAlias("set ", "assignments"),
        *_WHERE_ALIASES,
        *_JOIN_ALIASES,
    ),
    QueryKind.DELETE: (
        FieldAlias("table:", "table"),
        FieldAlias("delete from ", "table"),
        FieldAlias("from:", "table"),
        FieldAlias("from ", "table"),
        *_WHERE_ALIASES,
        *_JOIN_ALIASES,
    ),
})


def match_alias(line: str, aliases: Tuple[FieldAlias, ...]):
    """Return the first alias whose prefix starts ``line``, or None."""
    lowered = line.lower()
    for alias in aliases:
        if lowered.startswith(alias.prefix):
            return alias
    return None
