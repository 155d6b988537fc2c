"""Request-scoped logging context.

Values bound here live in structlog's context variables and are merged into
every event logged while a request is being served, so a single page view can
be followed through middleware, routing and rendering by its correlation id.
"""

import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import structlog

CORRELATION_KEY = "correlation_id"


def _request_fields(
    correlation_id: Optional[str],
    request_path: Optional[str],
    request_method: Optional[str],
    extra: Dict[str, Any],
) -> Dict[str, Any]:
    fields: Dict[str, Any] = {CORRELATION_KEY: correlation_id or str(uuid.uuid4())}
    optional = {"request_path": request_path, "request_method": request_method}
    fields.update({key: value for key, value in optional.items() if value is not None})
    fields.update(extra)
    return fields


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Iterator[str]:
    """Bind request metadata to every log event inside the block.

    A fresh UUID4 is used when no correlation id is given. Path and method
    are only bound when set; any keyword extras (locale, host) are bound as-is.
    The bound keys are removed again on exit, including on error.

    Yields:
        The correlation id in effect for the block.

    Example:
        with bind_request_context(request_path="/en/about", locale="en") as cid:
            logger.info("page_requested")
    """
    fields = _request_fields(correlation_id, request_path, request_method, extra_context)
    structlog.contextvars.bind_contextvars(**fields)
    try:
        yield fields[CORRELATION_KEY]
    finally:
        structlog.contextvars.unbind_contextvars(*fields)


def get_correlation_id() -> Optional[str]:
    return structlog.contextvars.get_contextvars().get(CORRELATION_KEY)


def set_correlation_id(correlation_id: str) -> None:
    structlog.contextvars.bind_contextvars(**{CORRELATION_KEY: correlation_id})


def clear_request_context() -> None:
    """Drop everything bound to the current context."""
    structlog.contextvars.clear_contextvars()
