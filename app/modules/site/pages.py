"""Static content page catalog.

Each page maps a locale-independent path (from PAGES) to the translation
namespace holding its content: ``pages.<id>.title`` and ``pages.<id>.body``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from modules.site.constants import PAGES


@dataclass(frozen=True)
class Page:
    """A static content page.

    Attributes:
        id: Translation identifier (pages.<id>.*).
        path: Path without locale prefix or slashes ("" for home).
        section: Navigation group ("services") or None for top-level pages.
        in_navigation: Whether the page is linked from the header.
        locales: Locale codes the page is published in; None means every
            supported locale.
    """

    id: str
    path: str
    section: Optional[str] = None
    in_navigation: bool = True
    locales: Optional[Tuple[str, ...]] = None

    def available_in(self, locale: str) -> bool:
        return self.locales is None or locale in self.locales

    @property
    def title_key(self) -> str:
        return f"pages.{self.id}.title"

    @property
    def body_key(self) -> str:
        return f"pages.{self.id}.body"

    @property
    def url_path(self) -> str:
        """Unprefixed URL path ("/" for home)."""
        return f"/{self.path}" if self.path else "/"


SITE_PAGES: Tuple[Page, ...] = (
    Page("home", PAGES["HOME"]),
    Page("about", PAGES["ABOUT"]),
    Page("bouquets", PAGES["SERVICES"]["BOUQUETS"], section="services"),
    Page("decoration", PAGES["SERVICES"]["DECORATION"], section="services"),
    Page("plants", PAGES["SERVICES"]["PLANTS"], section="services"),
    Page("events", PAGES["SERVICES"]["EVENTS"], section="services"),
    Page("subscription", PAGES["SERVICES"]["SUBSCRIPTION"], section="services"),
    Page("contact", PAGES["CONTACT"]),
    Page(
        "video_surveillance",
        PAGES["CONTENT"]["VIDEO_SURVEILLANCE"],
        in_navigation=False,
        locales=("lt",),
    ),
)

_PAGES_BY_PATH = {page.path: page for page in SITE_PAGES}


def get_page(path: str) -> Optional[Page]:
    """Look up a page by its unprefixed path; slashes are ignored."""
    return _PAGES_BY_PATH.get(path.strip("/"))


def navigation_pages(section: Optional[str] = None) -> Tuple[Page, ...]:
    """Pages shown in the header, optionally limited to one section."""
    return tuple(
        page
        for page in SITE_PAGES
        if page.in_navigation and page.section == section
    )
