"""Common exception types shared across sqlcraft."""

from sqlcraft.common.exceptions import (
    ErrorCode,
    SqlCraftError,
    build_error,
    configuration_error,
    syntax_error,
    unsupported_query_kind_error,
)

__all__ = [
    "ErrorCode",
    "SqlCraftError",
    "build_error",
    "configuration_error",
    "syntax_error",
    "unsupported_query_kind_error",
]
