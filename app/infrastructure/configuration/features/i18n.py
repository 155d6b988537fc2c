"""Internationalization feature settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import EnvSettings, split_csv


class I18nSettings(EnvSettings):
    """Locale configuration.

    Environment Variables:
        LANGUAGES: Comma-separated supported locale codes (default: lt,en,ru)
        DEFAULT_LANG: Explicit default locale override (ignored when unsupported)
        TRANSLATIONS_DIR: Directory holding <domain>.<code>.yml files
            (default: app/locales)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        codes = settings.i18n.languages
        override = settings.i18n.DEFAULT_LANG
        ```
    """

    LANGUAGES: str = Field(default="lt,en,ru", alias="LANGUAGES")
    DEFAULT_LANG: str | None = Field(default=None, alias="DEFAULT_LANG")
    TRANSLATIONS_DIR: str | None = Field(default=None, alias="TRANSLATIONS_DIR")

    @field_validator("DEFAULT_LANG", mode="before")
    @classmethod
    def _normalize_default_lang(cls, v: str | None) -> str | None:
        """Treat blank overrides as unset."""
        if v is None:
            return None
        v = str(v).strip().lower()
        return v or None

    @property
    def languages(self) -> list[str]:
        """Supported locale codes in configured order, lower-cased, deduplicated."""
        codes: list[str] = []
        for code in split_csv(self.LANGUAGES):
            code = code.lower()
            if code not in codes:
                codes.append(code)
        return codes
