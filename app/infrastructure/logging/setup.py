"""Structlog configuration for the site.

Development runs render colored console lines, production runs emit one JSON
object per event. Under pytest the root logger is raised above CRITICAL so
test output stays quiet.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging(settings=settings)

    logger = get_module_logger()
    logger.info("page_rendered", locale="lt", page="about")
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import Processor

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

QUIET_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _install(processors: List[Processor], level: int) -> BoundLogger:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    return structlog.stdlib.get_logger()


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        settings: Application settings. Loaded from the environment when
            omitted and one of the overrides below is missing.
        log_level: Override for settings.LOG_LEVEL (DEBUG, INFO, ...).
        is_production: Override for settings.is_production; selects JSON
            output instead of console output.

    Returns:
        Configured logger instance.
    """
    if _is_test_environment():
        return _install(
            [structlog.stdlib.add_log_level, structlog.processors.KeyValueRenderer()],
            QUIET_LEVEL,
        )

    if settings is None and (log_level is None or is_production is None):
        from infrastructure.configuration import Settings

        settings = Settings()

    json_output = is_production if is_production is not None else settings.is_production
    level = _level_from_name(log_level or settings.LOG_LEVEL)

    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    return _install(_shared_processors() + [renderer], level)


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last dotted segment) and ``module_path`` (full module
    name) so every event can be traced to its source.

    Example:
        # In infrastructure/i18n/resolvers.py
        logger = get_module_logger()
        # context: {"component": "resolvers", "module_path": "infrastructure.i18n.resolvers"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is None:
        return logger.bind(component="unknown")

    module_name = caller.f_globals.get("__name__", "unknown")
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
