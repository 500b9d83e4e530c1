"""Shared observability context utilities."""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from opentelemetry.trace import Status, StatusCode

from sqlcraft.logging import get_logger
from sqlcraft.logging.filters import clear_request_context, set_request_context
from sqlcraft.telemetry import get_tracer


def _stringify(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(item) for item in value)
    return str(value)


def sanitize_extras(
    extra: Optional[Dict[str, Any]],
    *,
    prefix: Optional[str] = None,
) -> Dict[str, str]:
    """Sanitize arbitrary telemetry extras into a JSON-safe dict."""
    if not extra:
        return {}

    result: Dict[str, str] = {}
    for key, value in extra.items():
        sanitized = _stringify(value)
        if sanitized is None:
            continue
        field = f"{prefix}{key}" if prefix else str(key)
        result[field] = sanitized
    return result


@contextmanager
def request_scope(
    operation: str,
    *,
    request_id: Optional[str] = None,
    attributes: Optional[Dict[str, Any]] = None,
) -> Iterator[str]:
    """Apply logging + tracing scope for one engine request.

    Args:
        operation: Span name and ``operation.name`` log attribute
        request_id: Correlation id, generated when omitted
        attributes: Extra span attributes, prefixed with ``sqlcraft.``

    Yields:
        The request id in effect for the scope
    """
    request_id = request_id or str(uuid.uuid4())
    set_request_context(request_id=request_id)

    tracer = get_tracer("sqlcraft")
    span_attributes = sanitize_extras(
        {"request_id": request_id, "operation.name": operation, **(attributes or {})},
        prefix="sqlcraft.",
    )

    with tracer.start_as_current_span(operation) as span:
        for key, value in span_attributes.items():
            span.set_attribute(key, value)

        try:
            yield request_id
        except Exception as exc:
            span.record_exception(exc)
            span.set_status(Status(StatusCode.ERROR))
            get_logger(__name__).error(
                "request.failed",
                extra={"request_id": request_id, "operation.name": operation},
                exc_info=True,
            )
            raise
        finally:
            clear_request_context()
