"""Locale API: supported locales and flattened translation dictionaries."""

from fastapi import APIRouter, HTTPException

from infrastructure.logging import get_module_logger
from infrastructure.services import LocaleRegistryDep

logger = get_module_logger()
router = APIRouter(prefix="/i18n", tags=["i18n"])


@router.get("/locales")
def list_locales(registry: LocaleRegistryDep):
    """List supported locales, the default locale and display names."""
    return {
        "locales": list(registry.supported_locales),
        "default": registry.default_locale,
        "names": registry.language_names(),
    }


@router.get("/{code}")
def get_translations(code: str, registry: LocaleRegistryDep):
    """Return the flattened translation dictionary for a supported locale.

    Raises:
        HTTPException: 404 when the locale is not supported.
    """
    if not registry.is_supported(code):
        logger.info("unsupported_locale_requested", locale=code)
        raise HTTPException(status_code=404, detail=f"Locale not supported: {code}")
    return registry.get_catalog(code).flatten()
