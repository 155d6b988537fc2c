"""XML sitemaps.

A sitemap index points at a single sitemap that lists every page in every
supported locale, with hreflang alternates linking the translations.
"""

from xml.sax.saxutils import escape, quoteattr

from fastapi import APIRouter, Response

from infrastructure.i18n import LocaleResolver
from infrastructure.services import LocaleResolverDep, SettingsDep
from modules.site import all_page_paths

router = APIRouter(tags=["SEO"])

XML_MEDIA_TYPE = "application/xml"
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"


def build_sitemap_index(origin: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<sitemapindex xmlns="{SITEMAP_NS}">\n'
        f"  <sitemap><loc>{escape(origin)}/sitemap-0.xml</loc></sitemap>\n"
        "</sitemapindex>\n"
    )


def build_sitemap(origin: str, resolver: LocaleResolver) -> str:
    """Render a urlset with one <url> per page and locale."""
    entries = []
    for _page, paths in all_page_paths(resolver):
        alternates = "".join(
            f"\n    <xhtml:link rel=\"alternate\" hreflang={quoteattr(code)} "
            f"href={quoteattr(origin + path)}/>"
            for code, path in paths.items()
        )
        for path in paths.values():
            entries.append(
                f"  <url>\n    <loc>{escape(origin + path)}</loc>{alternates}\n  </url>"
            )
    body = "\n".join(entries)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NS}" xmlns:xhtml="{XHTML_NS}">\n'
        f"{body}\n"
        "</urlset>\n"
    )


@router.get("/sitemap-index.xml")
def get_sitemap_index(settings: SettingsDep):
    """Serve the sitemap index."""
    return Response(
        build_sitemap_index(settings.site.canonical_origin), media_type=XML_MEDIA_TYPE
    )


@router.get("/sitemap-0.xml")
def get_sitemap(settings: SettingsDep, resolver: LocaleResolverDep):
    """Serve the page sitemap."""
    return Response(
        build_sitemap(settings.site.canonical_origin, resolver),
        media_type=XML_MEDIA_TYPE,
    )
