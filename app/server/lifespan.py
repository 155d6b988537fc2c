"""Startup and shutdown for the site application.

Startup configures logging, records which settings were loaded and builds
the locale registry. A supported language without translation files stops
the application here instead of surfacing as broken pages later.
"""

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.i18n import LocaleConfigurationError
from infrastructure.logging import configure_logging
from infrastructure.services import get_locale_registry, get_settings

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _log_configuration(settings: "Settings", logger: BoundLogger) -> None:
    """Log top-level values, then the field names of each settings group."""
    dumped = settings.model_dump()
    top_level = [{key: value} for key, value in dumped.items() if not isinstance(value, dict)]
    logger.info("configuration_initialized", base_settings=top_level)

    for group, values in dumped.items():
        if isinstance(values, dict):
            logger.info("configuration_loaded", config_setting=group, keys=list(values))


def _load_locales(app: FastAPI, logger: BoundLogger) -> None:
    try:
        registry = get_locale_registry()
    except LocaleConfigurationError as exc:
        logger.error("locale_registry_activation_failed", error=str(exc))
        raise

    app.state.locale_registry = registry
    logger.info(
        "locale_registry_activated",
        supported=list(registry.supported_locales),
        default=registry.default_locale,
        hostname=registry.hostname,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = configure_logging(settings=settings)
    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup", site=settings.site.SITE_NAME)
    _log_configuration(settings, logger)
    _load_locales(app, logger)

    yield

    logger.info("application_shutdown")
