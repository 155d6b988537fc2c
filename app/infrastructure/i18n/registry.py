"""Process-wide locale registry.

Holds the supported locale codes, the default locale and one translation
catalog per supported code. Built once at startup and read-only afterwards.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from infrastructure.i18n.exceptions import LocaleConfigurationError
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    LocaleConfig,
    TranslationCatalog,
    TranslationKey,
    normalize_locale_code,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LANGUAGE_NAME_KEY = TranslationKey("meta", "language_name")


class LocaleRegistry:
    """Read-only table of locale codes and their translation catalogs.

    Every supported locale has exactly one catalog; catalogs for codes outside
    the supported set are dropped.
    """

    def __init__(
        self,
        config: LocaleConfig,
        catalogs: Mapping[str, TranslationCatalog],
    ):
        """Initialize the registry.

        Args:
            config: Locale configuration (supported codes and default).
            catalogs: Catalog per locale code.

        Raises:
            LocaleConfigurationError: If the default is unsupported or a
                supported locale has no catalog.
        """
        if config.default_locale not in config.supported_locales:
            raise LocaleConfigurationError(
                f"Default locale {config.default_locale} is not in supported locales "
                f"{list(config.supported_locales)}"
            )

        missing = [code for code in config.supported_locales if code not in catalogs]
        if missing:
            raise LocaleConfigurationError(
                f"No translations loaded for supported locale(s): {', '.join(missing)}"
            )

        ignored = sorted(set(catalogs) - set(config.supported_locales))
        if ignored:
            logger.info("unsupported_catalogs_ignored", locales=ignored)

        self._config = config
        self._catalogs: Mapping[str, TranslationCatalog] = MappingProxyType(
            {code: catalogs[code].frozen() for code in config.supported_locales}
        )

    @property
    def config(self) -> LocaleConfig:
        return self._config

    @property
    def supported_locales(self) -> Tuple[str, ...]:
        return self._config.supported_locales

    @property
    def default_locale(self) -> str:
        return self._config.default_locale

    @property
    def hostname(self) -> Optional[str]:
        return self._config.hostname

    def is_supported(self, code: Optional[str]) -> bool:
        return self._config.is_supported(code)

    def normalize(self, code: Optional[str]) -> str:
        """Map any code to a supported one, unknown codes to the default."""
        normalized = normalize_locale_code(code)
        if normalized in self._catalogs:
            return normalized
        return self.default_locale

    def get_catalog(self, code: Optional[str]) -> TranslationCatalog:
        """Return the catalog for a code, the default catalog for unknown codes."""
        return self._catalogs[self.normalize(code)]

    def language_names(self) -> Dict[str, str]:
        """Display name per supported locale, in configured order."""
        return {
            code: self._catalogs[code].get_message(LANGUAGE_NAME_KEY) or code
            for code in self.supported_locales
        }


def build_registry(config: LocaleConfig, loader: TranslationLoader) -> LocaleRegistry:
    """Load one catalog per supported locale and build the registry.

    Raises:
        LocaleConfigurationError: If a supported locale has no translation files.
    """
    catalogs = loader.load_all(config.supported_locales)
    registry = LocaleRegistry(config, catalogs)
    logger.info(
        "locale_registry_built",
        supported=list(registry.supported_locales),
        default=registry.default_locale,
    )
    return registry
