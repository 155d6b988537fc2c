"""Content page routes.

URL convention: ``/{locale}/{page}`` with the locale omitted for the default
locale. A path prefixed with the default locale is permanently redirected to
its unprefixed form. This router must be included last: it matches every path.
"""

from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from infrastructure.logging import get_module_logger
from infrastructure.services import LocaleResolverDep, SettingsDep, TranslatorDep
from modules.site import get_page, render_not_found, render_page

logger = get_module_logger()
router = APIRouter(tags=["Pages"])


@router.get("/{path:path}", response_class=HTMLResponse)
def get_site_page(
    path: str,
    request: Request,
    settings: SettingsDep,
    resolver: LocaleResolverDep,
    translator: TranslatorDep,
):
    """Render a content page in the locale named by the URL prefix."""
    prefix, rest = resolver.split_locale(f"/{path}")
    # Re-encoded so a decoded "?" or "#" stays in the path of generated links.
    rest_path = f"/{quote(rest)}"

    if prefix == resolver.default_locale:
        target = resolver.get_locale_path(prefix, rest_path)
        if request.url.query:
            target = f"{target}?{request.url.query}"
        logger.info("default_locale_prefix_redirect", path=request.url.path, target=target)
        return RedirectResponse(target, status_code=301)

    locale = prefix or resolver.default_locale
    t = translator.use_translations(locale)

    page = get_page(rest)
    if page is None or not page.available_in(locale):
        logger.info("page_not_found", path=request.url.path, locale=locale)
        return HTMLResponse(
            render_not_found(t, locale, resolver, settings.site, rest_path),
            status_code=404,
        )

    return HTMLResponse(render_page(page, t, locale, resolver, settings.site))
