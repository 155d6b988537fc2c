"""Locale resolution and locale-aware path rewriting.

Determines the active locale from a URL (path prefix or hostname TLD) and
builds locale-specific paths. URL convention: ``/{locale}/...`` with the
prefix omitted for the default locale.
"""

from typing import Dict, List, Optional, Tuple
from urllib.parse import urlsplit

from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.strategies import hostname_tld
from infrastructure.i18n.models import normalize_locale_code
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def _path_of(url: str) -> str:
    """Path of a URL.

    A value starting with "/" is already a decoded request path and is kept
    whole, so a literal "?" or "#" in it stays part of the path.
    """
    if not url:
        return "/"
    if url.startswith("/"):
        return url
    return urlsplit(url).path or "/"


def _link_path(path: str) -> str:
    """Drop query and fragment from a link target such as "/about?ref=nav"."""
    return urlsplit(path).path or "/"


def _host_of(url_or_host: str) -> str:
    """Extract the hostname from a full URL or a bare host[:port]."""
    if not url_or_host:
        return ""
    if "//" in url_or_host:
        return urlsplit(url_or_host).hostname or ""
    return url_or_host.split("/")[0]


class LocaleResolver:
    """Resolves the active locale and rewrites paths between locales.

    All resolution methods are total: unmatched input resolves to the
    default locale instead of raising.
    """

    def __init__(self, registry: LocaleRegistry):
        """Initialize locale resolver.

        Args:
            registry: Locale registry providing supported codes and default.
        """
        self.registry = registry
        self.log = logger.bind(default_locale=registry.default_locale)

    @property
    def default_locale(self) -> str:
        return self.registry.default_locale

    def split_locale(self, path: str) -> Tuple[Optional[str], str]:
        """Split an explicit locale prefix off a path.

        A value starting with "/" is taken as a decoded request path and split
        on "/" only; full URLs are parsed and lose their query and fragment.

        Args:
            path: URL path (e.g. "/ru/services/plants") or full URL.

        Returns:
            (locale, rest) where locale is None when the first segment is not
            a supported code, and rest is the remaining path without leading
            or trailing slashes.
        """
        segments = [s for s in _path_of(path).split("/") if s]
        if segments and self.registry.is_supported(segments[0]):
            return normalize_locale_code(segments[0]), "/".join(segments[1:])
        return None, "/".join(segments)

    def resolve_from_url(self, url: str) -> str:
        """Resolve locale from the first path segment of a URL.

        Args:
            url: Full URL or path (e.g. "https://www.jaukuma.lt/en/about").

        Returns:
            The prefixed locale when supported, otherwise the default.
        """
        locale, _ = self.split_locale(url)
        if locale is None:
            self.log.debug("locale_defaulted", url=url)
            return self.default_locale
        return locale

    def resolve_from_host(self, url_or_host: str) -> str:
        """Resolve locale from the hostname's top-level label.

        Args:
            url_or_host: Full URL or host (e.g. "jaukuma.ru", "https://jaukuma.en/").

        Returns:
            The TLD when it is a supported code, otherwise the default.
        """
        tld = hostname_tld(_host_of(url_or_host))
        if self.registry.is_supported(tld):
            return tld
        self.log.debug("locale_defaulted", host=url_or_host)
        return self.default_locale

    def get_locale_path(self, code: str, current_path: str) -> str:
        """Rewrite a path to its equivalent under another locale.

        Any existing locale prefix is stripped first. The default locale maps
        to the unprefixed path ("/" for the root), any other locale to
        "/{code}/{path}" ("/{code}/" for the root).

        Args:
            code: Target locale code.
            current_path: Current URL path or URL; query and fragment are ignored.

        Returns:
            Locale-specific path.
        """
        _, rest = self.split_locale(_link_path(current_path))
        target = normalize_locale_code(code)
        if target == self.default_locale:
            return f"/{rest}" if rest else "/"
        return f"/{target}/{rest}" if rest else f"/{target}/"

    def get_static_paths(self) -> List[Dict[str, Dict[str, str]]]:
        """List route parameters for every supported locale, in configured order."""
        return [
            {"params": {"locale": locale}} for locale in self.registry.supported_locales
        ]

    def alternate_links(self, current_path: str) -> List[Tuple[str, str]]:
        """Return (locale, path) for the current page in every supported locale."""
        return [
            (locale, self.get_locale_path(locale, current_path))
            for locale in self.registry.supported_locales
        ]
