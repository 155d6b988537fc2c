"""Translation service for retrieving and interpolating translated messages."""

import re
from typing import Any, Callable, Dict, Optional, Union

from infrastructure.i18n.exceptions import TranslationNotFoundError
from infrastructure.i18n.models import TranslationCatalog, TranslationKey
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.logging import get_module_logger

logger = get_module_logger()

KeyLike = Union[str, TranslationKey]

_DOUBLE_PATTERN = re.compile(r"\{\{(\w+)\}\}")
_SINGLE_PATTERN = re.compile(r"\{(\w+)\}")


def _as_key(key: KeyLike) -> TranslationKey:
    if isinstance(key, TranslationKey):
        return key
    return TranslationKey.from_string(key)


class Translator:
    """Service for translating messages with variable interpolation.

    Lookups go to the requested locale first, then to the registry's default
    locale. Unknown locales are treated as the default locale.

    Attributes:
        registry: LocaleRegistry holding the catalogs.
        resolver: LocaleResolver used for URL-based helpers.
    """

    def __init__(
        self,
        registry: LocaleRegistry,
        resolver: Optional[LocaleResolver] = None,
    ):
        """Initialize Translator.

        Args:
            registry: Locale registry with one catalog per supported locale.
            resolver: Optional resolver; built from the registry when omitted.
        """
        self.registry = registry
        self.resolver = resolver or LocaleResolver(registry)

    @property
    def default_locale(self) -> str:
        return self.registry.default_locale

    def translate(
        self,
        locale: Optional[str],
        key: KeyLike,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Args:
            locale: Locale code to translate to; unknown codes use the default.
            key: "namespace.key" string or TranslationKey.
            variables: Optional dict of variables for interpolation.

        Returns:
            Translated and interpolated message string.

        Raises:
            TranslationNotFoundError: If key not found in requested or default locale.
            ValueError: If the key is malformed or a placeholder has no variable.
        """
        translation_key = _as_key(key)
        code = self.registry.normalize(locale)

        message = self.registry.get_catalog(code).get_message(translation_key)

        if message is None and code != self.default_locale:
            message = self.registry.get_catalog(self.default_locale).get_message(
                translation_key
            )
            if message is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=str(translation_key),
                    requested_locale=code,
                    fallback_locale=self.default_locale,
                )

        if message is None:
            logger.error(
                "translation_not_found",
                key=str(translation_key),
                locale=code,
                fallback_locale=self.default_locale,
            )
            raise TranslationNotFoundError(
                str(translation_key), code, self.default_locale
            )

        return self._interpolate(message, variables or {})

    def use_translations(self, locale: Optional[str]) -> Callable[..., str]:
        """Return a translation function bound to a locale.

        Example:
            t = translator.use_translations("ru")
            t("nav.home")
            t("footer.copyright", year=2025)
        """
        code = self.registry.normalize(locale)

        def t(key: KeyLike, **variables: Any) -> str:
            return self.translate(code, key, variables)

        t.locale = code  # type: ignore[attr-defined]
        return t

    def use_translations_from_url(self, url: str) -> Callable[..., str]:
        """Return a translation function for the locale found in a URL."""
        return self.use_translations(self.resolver.resolve_from_url(url))

    def has_message(self, locale: str, key: KeyLike) -> bool:
        """Check if a translation exists for key in that locale only.

        Returns:
            True if message exists in the locale, False otherwise (including
            unsupported locales).
        """
        if not self.registry.is_supported(locale):
            return False
        return self.registry.get_catalog(locale).has_message(_as_key(key))

    def get_catalog(self, locale: Optional[str]) -> TranslationCatalog:
        """Get the catalog used for a locale."""
        return self.registry.get_catalog(locale)

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Replace {{name}} and {name} placeholders with variable values.

        Raises:
            ValueError: If a placeholder has no matching variable.
        """
        double_matches = _DOUBLE_PATTERN.findall(message)
        single_matches = _SINGLE_PATTERN.findall(message)

        for var_name in dict.fromkeys(double_matches + single_matches):
            if var_name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=var_name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {var_name}")

        # Double-brace placeholders first so "{{x}}" is not half-replaced.
        for var_name in double_matches:
            message = message.replace(f"{{{{{var_name}}}}}", str(variables[var_name]))

        for var_name in single_matches:
            message = message.replace(f"{{{var_name}}}", str(variables[var_name]))

        return message
