"""Default locale selection strategies.

The default locale is chosen by evaluating an ordered list of strategies;
the first one that returns a supported code wins:

1. Explicit override (DEFAULT_LANG)
2. Top-level label of the production hostname (PROD_SITE)
3. The fixed fallback code (FALLBACK_LOCALE, "lt")
4. First supported code, for deployments that do not serve "lt"
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from infrastructure.i18n.exceptions import LocaleConfigurationError
from infrastructure.i18n.models import LocaleConfig, normalize_locale_code
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()

FALLBACK_LOCALE = "lt"


def hostname_tld(hostname: Optional[str]) -> str:
    """Return the last dot-separated label of a hostname, port stripped.

    Examples:
        hostname_tld("www.jaukuma.lt:443")
        Output: "lt"
    """
    if not hostname:
        return ""
    host = hostname.strip().lower().split(":")[0].rstrip(".")
    return host.rsplit(".", 1)[-1] if host else ""


class DefaultLocaleStrategy(ABC):
    """A single step in the default locale fallback chain."""

    name: str = "strategy"

    @abstractmethod
    def select(self, supported: Sequence[str]) -> Optional[str]:
        """Return a supported locale code, or None to defer to the next step."""


class ExplicitOverrideStrategy(DefaultLocaleStrategy):
    """Use an explicitly configured locale when it is supported."""

    name = "explicit_override"

    def __init__(self, code: Optional[str]):
        self.code = normalize_locale_code(code)

    def select(self, supported: Sequence[str]) -> Optional[str]:
        if self.code and self.code in supported:
            return self.code
        if self.code:
            logger.warning(
                "default_locale_override_ignored",
                override=self.code,
                supported=list(supported),
            )
        return None


class HostnameTldStrategy(DefaultLocaleStrategy):
    """Derive the locale from the deployment hostname's top-level domain."""

    name = "hostname_tld"

    def __init__(self, hostname: Optional[str]):
        self.hostname = hostname

    def select(self, supported: Sequence[str]) -> Optional[str]:
        tld = hostname_tld(self.hostname)
        return tld if tld in supported else None


class FixedFallbackStrategy(DefaultLocaleStrategy):
    """Use a fixed code, independent of how LANGUAGES is ordered."""

    name = "fixed_fallback"

    def __init__(self, code: str = FALLBACK_LOCALE):
        self.code = normalize_locale_code(code)

    def select(self, supported: Sequence[str]) -> Optional[str]:
        return self.code if self.code in supported else None


class FirstSupportedStrategy(DefaultLocaleStrategy):
    """Use the first configured locale when the fixed fallback is not served."""

    name = "first_supported"

    def select(self, supported: Sequence[str]) -> Optional[str]:
        return supported[0] if supported else None


def resolve_default_locale(
    strategies: Iterable[DefaultLocaleStrategy],
    supported: Sequence[str],
) -> str:
    """Evaluate strategies in order and return the first selected locale.

    Raises:
        LocaleConfigurationError: If no strategy selects a locale.
    """
    for strategy in strategies:
        code = strategy.select(supported)
        if code is not None:
            logger.info("default_locale_resolved", locale=code, strategy=strategy.name)
            return code
    raise LocaleConfigurationError(
        f"Unable to determine a default locale from supported locales: {list(supported)}"
    )


def default_strategies(
    override: Optional[str], hostname: Optional[str]
) -> list[DefaultLocaleStrategy]:
    """Build the standard fallback chain."""
    return [
        ExplicitOverrideStrategy(override),
        HostnameTldStrategy(hostname),
        FixedFallbackStrategy(),
        FirstSupportedStrategy(),
    ]


def build_locale_config(settings: "Settings") -> LocaleConfig:
    """Build a LocaleConfig from application settings.

    Args:
        settings: Application settings.

    Returns:
        LocaleConfig with supported codes and the resolved default.

    Raises:
        LocaleConfigurationError: If LANGUAGES yields no locale codes.
    """
    supported = tuple(settings.i18n.languages)
    if not supported:
        raise LocaleConfigurationError("LANGUAGES must list at least one locale code")

    hostname = settings.site.PROD_SITE
    default = resolve_default_locale(
        default_strategies(settings.i18n.DEFAULT_LANG, hostname), supported
    )
    return LocaleConfig(
        supported_locales=supported,
        default_locale=default,
        hostname=hostname,
    )
