"""robots.txt route.

Development hosts (any hostname containing "dev", or MODE=development) are
closed to crawlers; every other host allows crawling. Both variants point
crawlers at the production sitemap index.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from infrastructure.configuration import SiteSettings
from infrastructure.services import SettingsDep

router = APIRouter(tags=["SEO"])

ROBOTS_TEMPLATE = """User-agent: *
{rule}

Sitemap: {origin}/sitemap-index.xml"""


def is_development_host(hostname: str, site: SiteSettings) -> bool:
    return "dev" in hostname.lower() or site.is_development


def build_robots_txt(hostname: str, site: SiteSettings) -> str:
    """Render robots.txt for the host a request was made to."""
    rule = "Disallow: /" if is_development_host(hostname, site) else "Allow: /"
    return ROBOTS_TEMPLATE.format(rule=rule, origin=site.canonical_origin)


@router.get("/robots.txt", response_class=PlainTextResponse)
def get_robots_txt(request: Request, settings: SettingsDep):
    """Serve robots.txt."""
    return PlainTextResponse(build_robots_txt(request.url.hostname or "", settings.site))
