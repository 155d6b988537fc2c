"""Request middleware for the site.

Every middleware reads its settings or resolver through a provider callable
at dispatch time, so the cached providers can be swapped in tests.
"""

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from infrastructure.configuration import Settings
from infrastructure.i18n import LocaleResolver
from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.services import get_locale_resolver, get_settings

logger = get_module_logger()

SettingsProvider = Callable[[], Settings]
ResolverProvider = Callable[[], LocaleResolver]

CORRELATION_HEADER = "X-Correlation-ID"
NO_INDEX_VALUE = "noindex, nofollow"


def request_host(request) -> str:
    """Host header without port, lower-cased."""
    host = request.headers.get("host", "")
    return host.rsplit(":", 1)[0].strip().lower() if host else ""


def apex_domain(settings: Settings) -> str:
    """The bare domain that should redirect to its www. host."""
    apex = settings.server.APEX_DOMAIN or settings.site.PROD_SITE
    return apex[len("www.") :] if apex.startswith("www.") else apex


class CanonicalHostMiddleware(BaseHTTPMiddleware):
    """Permanently redirect the apex host to www.<apex>, keeping path and query."""

    def __init__(self, app, settings_provider: SettingsProvider = get_settings):
        super().__init__(app)
        self.settings_provider = settings_provider

    async def dispatch(self, request, call_next):
        settings = self.settings_provider()
        if settings.server.CANONICAL_REDIRECT_ENABLED:
            apex = apex_domain(settings)
            if request_host(request) == apex:
                scheme = request.headers.get("x-forwarded-proto", request.url.scheme)
                target = str(request.url.replace(scheme=scheme, netloc=f"www.{apex}"))
                logger.info(
                    "canonical_host_redirect",
                    host=apex,
                    path=request.url.path,
                )
                return RedirectResponse(target, status_code=301)
        return await call_next(request)


class NoIndexMiddleware(BaseHTTPMiddleware):
    """Tag every response outside production as non-indexable."""

    def __init__(self, app, settings_provider: SettingsProvider = get_settings):
        super().__init__(app)
        self.settings_provider = settings_provider

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        if not self.settings_provider().is_production:
            response.headers["X-Robots-Tag"] = NO_INDEX_VALUE
        return response


class LocaleMiddleware(BaseHTTPMiddleware):
    """Store the URL's locale on request.state and label HTML responses with it."""

    def __init__(
        self, app, resolver_provider: ResolverProvider = get_locale_resolver
    ):
        super().__init__(app)
        self.resolver_provider = resolver_provider

    async def dispatch(self, request, call_next):
        locale = self.resolver_provider().resolve_from_url(request.url.path)
        request.state.locale = locale
        response = await call_next(request)
        if response.headers.get("content-type", "").startswith("text/html"):
            response.headers["Content-Language"] = locale
        return response


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind correlation id, path and method to the logging context."""

    async def dispatch(self, request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            response = await call_next(request)
            logger.debug("request_completed", status_code=response.status_code)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
