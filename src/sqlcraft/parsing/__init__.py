"""Line-oriented intent grammar: alias table and parser."""

from sqlcraft.parsing.aliases import FIELD_ALIASES, FIELD_MODES, FieldAlias, FieldMode, match_alias
from sqlcraft.parsing.parser import parse_intent, parse_leading_int, split_list

__all__ = [
    "FIELD_ALIASES",
    "FIELD_MODES",
    "FieldAlias",
    "FieldMode",
    "match_alias",
    "parse_intent",
    "parse_leading_int",
    "split_list",
]
