"""Custom exceptions for the i18n system."""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            registry = create_registry(settings)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class LocaleConfigurationError(I18nError, ValueError):
    """Raised when the locale configuration cannot be satisfied.

    Covers an empty supported-locale set and supported locales that have no
    translation files.

    Example:
        >>> LocaleRegistry(LocaleConfig(("lt", "en"), "lt"), {"lt": catalog})
        Traceback (most recent call last):
        ...
        LocaleConfigurationError: No translations loaded for supported locale(s): en
    """

    pass


class TranslationNotFoundError(I18nError, KeyError):
    """Raised when a key is missing from both the requested and default locale."""

    def __init__(self, key: str, locale: str, default_locale: str):
        self.key = key
        self.locale = locale
        self.default_locale = default_locale
        super().__init__(
            f"Translation not found for key {key} in {locale} or default {default_locale}"
        )

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0])
