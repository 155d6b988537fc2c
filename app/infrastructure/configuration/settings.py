"""Top-level settings object for the site."""

from typing import ClassVar, Dict, Type

from pydantic_settings import BaseSettings

from infrastructure.configuration.base import EnvSettings
from infrastructure.configuration.features import I18nSettings, SiteSettings
from infrastructure.configuration.infrastructure import ServerSettings


class Settings(EnvSettings):
    """All configuration, grouped by concern.

    ``i18n`` holds the supported languages and where translations live,
    ``site`` the public identity (name, production host, mode) and ``server``
    the request handling switches (canonical host redirect, CORS origins).
    Groups not passed explicitly are read from the environment.

    Environment Variables:
        PREFIX: Deployment prefix; any non-empty value marks a non-production run
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Commit the running build was made from, served on /version

    Example:
        settings = get_settings()
        settings.i18n.languages   # ["lt", "en", "ru"]
        settings.site.PROD_SITE   # "jaukuma.lt"
    """

    GROUPS: ClassVar[Dict[str, Type[BaseSettings]]] = {
        "i18n": I18nSettings,
        "site": SiteSettings,
        "server": ServerSettings,
    }

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    i18n: I18nSettings
    site: SiteSettings
    server: ServerSettings

    def __init__(self, **kwargs):
        for name, group_class in self.GROUPS.items():
            if name not in kwargs:
                kwargs[name] = group_class()
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """Live deployment: no PREFIX and MODE is not development."""
        return not self.PREFIX and not self.site.is_development
