"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import (
    LocaleRegistry,
    LocaleResolver,
    Translator,
    create_registry,
)


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_locale_registry() -> LocaleRegistry:
    """
    Get application-scoped locale registry singleton.

    Translation files are read once per process; the registry is read-only
    afterwards and safe to share across requests.

    Returns:
        LocaleRegistry: Cached registry built from settings.

    Raises:
        LocaleConfigurationError: If the locale configuration is invalid.
    """
    return create_registry(get_settings())


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """
    Get application-scoped locale resolver singleton.

    Usage:
        @router.get("/{path:path}")
        def page(path: str, resolver: LocaleResolverDep):
            locale = resolver.resolve_from_url(path)
    """
    return LocaleResolver(get_locale_registry())


@lru_cache
def get_translator() -> Translator:
    """
    Get application-scoped translator singleton.

    Usage:
        @router.get("/greeting")
        def greeting(translator: TranslatorDep):
            return {"text": translator.translate("en", "nav.home")}
    """
    return Translator(get_locale_registry(), get_locale_resolver())


def reset_providers() -> None:
    """Clear all cached providers (used after settings change in tests)."""
    get_translator.cache_clear()
    get_locale_resolver.cache_clear()
    get_locale_registry.cache_clear()
    get_settings.cache_clear()
