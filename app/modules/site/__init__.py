"""Site content module.

Page catalog, theme constants and HTML rendering for the studio's
multi-locale marketing pages.
"""

from modules.site.colors import COLORS, CSS_COLOR_VARS, css_root_block, get_color
from modules.site.constants import (
    BREAKPOINTS,
    CONTACT,
    PAGE_SIZES,
    PAGES,
    SOCIAL_MEDIA,
)
from modules.site.pages import SITE_PAGES, Page, get_page, navigation_pages
from modules.site.render import all_page_paths, render_not_found, render_page

__all__ = [
    "BREAKPOINTS",
    "COLORS",
    "CONTACT",
    "CSS_COLOR_VARS",
    "PAGES",
    "PAGE_SIZES",
    "Page",
    "SITE_PAGES",
    "SOCIAL_MEDIA",
    "all_page_paths",
    "css_root_block",
    "get_color",
    "get_page",
    "navigation_pages",
    "render_not_found",
    "render_page",
]
