"""Infrastructure modules for the Jaukuma site.

Centralized infrastructure components:
- configuration: Settings management (Settings and per-concern settings)
- logging: Structured logging setup and request context binding
- i18n: Locale registry, locale resolution and translation
- services: Dependency injection providers (get_settings, SettingsDep, ...)
"""
