"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the site
using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale settings class (for testing)
    SiteSettings: Public site settings class (for testing)
    ServerSettings: Request handling settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    codes = settings.i18n.languages
    host = settings.site.PROD_SITE

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features import I18nSettings, SiteSettings
from infrastructure.configuration.infrastructure import ServerSettings

__all__ = ["Settings", "I18nSettings", "SiteSettings", "ServerSettings"]
