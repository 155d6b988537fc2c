"""Factory functions for creating i18n components.

Provides convenience functions for building the locale registry, resolver
and translator from application settings.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from infrastructure.i18n.exceptions import LocaleConfigurationError
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.registry import LocaleRegistry, build_registry
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.strategies import build_locale_config
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()

# This file is at .../app/infrastructure/i18n/factory.py
DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parents[2] / "locales"


def create_registry(
    settings: Optional["Settings"] = None,
    translations_dir: Path | None = None,
    use_cache: bool = True,
) -> LocaleRegistry:
    """Create the locale registry.

    Args:
        settings: Application settings (default: loaded from the environment).
        translations_dir: Path to YAML translation files (default:
            settings.i18n.TRANSLATIONS_DIR, then app/locales).
        use_cache: Whether the loader caches parsed YAML.

    Returns:
        LocaleRegistry: registry with one catalog per supported locale.

    Raises:
        LocaleConfigurationError: If the configuration or translation files
            cannot satisfy the supported locale set.

    Usage:
        registry = create_registry()
        registry = create_registry(translations_dir=Path("/custom/locales"))
    """
    if settings is None:
        from infrastructure.configuration import Settings

        settings = Settings()

    if translations_dir is None:
        configured = settings.i18n.TRANSLATIONS_DIR
        translations_dir = Path(configured) if configured else DEFAULT_TRANSLATIONS_DIR

    config = build_locale_config(settings)
    try:
        loader = YAMLTranslationLoader(translations_dir, use_cache=use_cache)
    except ValueError as e:
        raise LocaleConfigurationError(str(e)) from e

    registry = build_registry(config, loader)
    logger.info(
        "locale_registry_created",
        translations_dir=str(translations_dir),
        locale_count=len(registry.supported_locales),
    )
    return registry


def create_resolver(registry: Optional[LocaleRegistry] = None) -> LocaleResolver:
    """Create a LocaleResolver (building a default registry when omitted)."""
    return LocaleResolver(registry or create_registry())


def create_translator(registry: Optional[LocaleRegistry] = None) -> Translator:
    """Create a Translator (building a default registry when omitted)."""
    registry = registry or create_registry()
    return Translator(registry, LocaleResolver(registry))
