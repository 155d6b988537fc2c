"""Process-wide service instances and their FastAPI dependency aliases."""

from infrastructure.services.dependencies import (
    LocaleRegistryDep,
    LocaleResolverDep,
    SettingsDep,
    TranslatorDep,
)
from infrastructure.services.providers import (
    get_locale_registry,
    get_locale_resolver,
    get_settings,
    get_translator,
    reset_providers,
)

__all__ = [
    "LocaleRegistryDep",
    "LocaleResolverDep",
    "SettingsDep",
    "TranslatorDep",
    "get_locale_registry",
    "get_locale_resolver",
    "get_settings",
    "get_translator",
    "reset_providers",
]
