"""Request-scoped logging and tracing context."""

from sqlcraft.observability.context import request_scope, sanitize_extras

__all__ = [
    "request_scope",
    "sanitize_extras",
]
