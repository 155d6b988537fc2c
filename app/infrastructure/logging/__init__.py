"""Structured logging for the site, built on structlog.

``configure_logging`` runs once at startup; modules obtain their logger with
``get_module_logger`` and the request middleware wraps each request in
``bind_request_context`` so events carry a correlation id.
"""

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
    set_correlation_id,
)
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
    "get_correlation_id",
    "get_module_logger",
    "set_correlation_id",
]
