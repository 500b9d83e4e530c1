"""Structured logging for the query builder engine.

Every record is rendered as one JSON object per line. Fields passed via
``extra=`` and the context injected by :class:`ContextFilter` become
top-level keys. Records emitted inside a ``request_scope`` span also
carry its trace and span ids. Nothing is configured on import; callers
(the CLI, or an embedding application) opt in through
:func:`setup_logging`.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet

from opentelemetry import trace

# Attributes every LogRecord has; anything else on a record came from extra= or a filter
_STANDARD_RECORD_KEYS: FrozenSet[str] = frozenset(
    logging.LogRecord("sqlcraft", logging.INFO, __file__, 0, "", (), None).__dict__
) | {"asctime", "message"}

_FORMATTER_NAME = "sqlcraft_json"
_FILTER_NAME = "sqlcraft_context"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _trace_fields() -> Dict[str, str]:
    context = trace.get_current_span().get_span_context()
    if not context.is_valid:
        return {}
    return {
        "trace_id": format(context.trace_id, "032x"),
        "span_id": format(context.span_id, "016x"),
    }


class CustomJsonFormatter(logging.Formatter):
    """Render records as single-line JSON with context and trace ids."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_KEYS
        }
        payload.update(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
        )
        payload.update(_trace_fields())

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(level: str = "INFO") -> None:
    """Send JSON logs at ``level`` and above to stderr.

    stdout is left to query output so the CLI can be piped.

    Args:
        level: Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level = level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                _FORMATTER_NAME: {"()": CustomJsonFormatter},
            },
            "filters": {
                _FILTER_NAME: {"()": "sqlcraft.logging.filters.ContextFilter"},
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": _FORMATTER_NAME,
                    "filters": [_FILTER_NAME],
                    "stream": "ext://sys.stderr",
                }
            },
            "root": {"level": level, "handlers": ["stderr"]},
        }
    )
