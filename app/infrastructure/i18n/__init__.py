"""i18n system - locale registry, locale resolution and translation.

Main components:
- models: TranslationKey, TranslationCatalog, LocaleConfig
- strategies: ordered default-locale fallback chain
- loader: TranslationLoader and YAMLTranslationLoader
- registry: LocaleRegistry, the read-only locale table
- resolvers: LocaleResolver for URL/host resolution and path rewriting
- translator: Translator with default-locale fallback and interpolation
"""

from infrastructure.i18n.exceptions import (
    I18nError,
    LocaleConfigurationError,
    TranslationNotFoundError,
)
from infrastructure.i18n.factory import (
    create_registry,
    create_resolver,
    create_translator,
)
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import (
    LocaleConfig,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.registry import LocaleRegistry, build_registry
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.strategies import (
    DefaultLocaleStrategy,
    ExplicitOverrideStrategy,
    FirstSupportedStrategy,
    FixedFallbackStrategy,
    HostnameTldStrategy,
    build_locale_config,
    resolve_default_locale,
)
from infrastructure.i18n.translator import Translator

__all__ = [
    "I18nError",
    "LocaleConfigurationError",
    "TranslationNotFoundError",
    "create_registry",
    "create_resolver",
    "create_translator",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "LocaleConfig",
    "TranslationCatalog",
    "TranslationKey",
    "LocaleRegistry",
    "build_registry",
    "LocaleResolver",
    "DefaultLocaleStrategy",
    "ExplicitOverrideStrategy",
    "FirstSupportedStrategy",
    "FixedFallbackStrategy",
    "HostnameTldStrategy",
    "build_locale_config",
    "resolve_default_locale",
    "Translator",
]
