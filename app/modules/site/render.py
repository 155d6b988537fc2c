"""HTML rendering for static content pages.

Pages are assembled from translation strings; every user-visible string goes
through the locale's translation function and is HTML-escaped.
"""

from datetime import datetime, timezone
from html import escape
from string import Template
from typing import Callable, Optional

from infrastructure.configuration import SiteSettings
from infrastructure.i18n import LocaleResolver
from modules.site.colors import css_root_block
from modules.site.constants import BREAKPOINTS, CONTACT, PAGE_SIZES, SOCIAL_MEDIA
from modules.site.pages import SITE_PAGES, Page, navigation_pages

TranslateFn = Callable[..., str]

PAGE_HTML = Template(
    """<!DOCTYPE html>
<html lang="$lang">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="description" content="$description">
    <title>$title | $site_name</title>
$head_links
    <style>
$css_vars

        body {
            margin: 0;
            font-family: Georgia, "Times New Roman", serif;
            color: var(--color-main-primary);
            background: var(--color-main-secondary);
        }

        .page {
            max-width: ${max_width}px;
            min-width: ${min_width}px;
            margin: 0 auto;
            padding: 0 24px;
        }

        header, footer {
            display: flex;
            flex-wrap: wrap;
            gap: 16px;
            align-items: center;
            justify-content: space-between;
            padding: 24px 0;
        }

        nav ul, .languages {
            display: flex;
            gap: 16px;
            list-style: none;
            margin: 0;
            padding: 0;
        }

        a {
            color: var(--color-additional-blue);
        }

        a[aria-current="page"] {
            font-weight: 700;
        }

        main p {
            line-height: 1.8;
        }

        @media (max-width: ${md}px) {
            header, footer {
                flex-direction: column;
                align-items: flex-start;
            }
        }
    </style>
</head>
<body>
    <div class="page">
        <header>
            <a class="brand" href="$home_href">$site_name</a>
            <nav aria-label="$nav_label">
                <ul>
$nav_items
                </ul>
            </nav>
            <ul class="languages" aria-label="$language_label">
$language_items
            </ul>
        </header>
        <main id="main">
            <h1>$title</h1>
$body
        </main>
        <footer>
            <a href="tel:$phone">$phone_label: $phone</a>
            <a href="$instagram" rel="noopener noreferrer">Instagram</a>
            <a href="$facebook" rel="noopener noreferrer">Facebook</a>
            <p>$copyright</p>
        </footer>
    </div>
</body>
</html>
"""
)


def _paragraphs(text: str) -> str:
    blocks = [block.strip() for block in text.split("\n\n") if block.strip()]
    return "\n".join(
        f"            <p>{escape(' '.join(block.split()))}</p>" for block in blocks
    )


def _link(href: str, label: str, current: bool = False) -> str:
    aria = ' aria-current="page"' if current else ""
    return f'<a href="{escape(href)}"{aria}>{escape(label)}</a>'


def _published_links(
    resolver: LocaleResolver, current_path: str, page: Optional[Page]
) -> list[tuple[str, str]]:
    """Locale paths of the current page, limited to the locales it is published in."""
    return [
        (locale, path)
        for locale, path in resolver.alternate_links(current_path)
        if page is None or page.available_in(locale)
    ]


def _head_links(
    resolver: LocaleResolver,
    site: SiteSettings,
    current_path: str,
    page: Optional[Page],
) -> str:
    origin = site.canonical_origin
    lines = [
        f'    <link rel="canonical" href="{escape(origin + current_path)}">',
    ]
    published = _published_links(resolver, current_path, page)
    for locale, path in published:
        lines.append(
            f'    <link rel="alternate" hreflang="{locale}" href="{escape(origin + path)}">'
        )
    default_path = dict(published).get(resolver.default_locale)
    if default_path is not None:
        lines.append(
            f'    <link rel="alternate" hreflang="x-default" href="{escape(origin + default_path)}">'
        )
    return "\n".join(lines)


def _nav_items(
    t: TranslateFn, locale: str, resolver: LocaleResolver, current: Optional[Page]
) -> str:
    items = []
    for page in navigation_pages():
        label = t("nav.home") if page.id == "home" else t(page.title_key)
        href = resolver.get_locale_path(locale, page.url_path)
        items.append(f"                    <li>{_link(href, label, page == current)}</li>")
        if page.id == "about":
            services = "".join(
                f"<li>{_link(resolver.get_locale_path(locale, s.url_path), t(s.title_key), s == current)}</li>"
                for s in navigation_pages("services")
            )
            items.append(
                f"                    <li>{escape(t('nav.services'))}<ul>{services}</ul></li>"
            )
    return "\n".join(items)


def _language_items(
    locale: str, resolver: LocaleResolver, current_path: str, page: Optional[Page]
) -> str:
    """Switcher entries; locales the page is not published in link to their home."""
    names = resolver.registry.language_names()
    items = []
    for code, path in resolver.alternate_links(current_path):
        if page is not None and not page.available_in(code):
            path = resolver.get_locale_path(code, "/")
        link = _link(path, names.get(code, code), current=code == locale)
        items.append(
            f'                <li lang="{code}" hreflang="{code}">{link}</li>'
        )
    return "\n".join(items)


def _render(
    *,
    title: str,
    body_html: str,
    t: TranslateFn,
    locale: str,
    resolver: LocaleResolver,
    site: SiteSettings,
    current_path: str,
    current: Optional[Page],
) -> str:
    year = datetime.now(timezone.utc).year
    return PAGE_HTML.substitute(
        lang=escape(locale),
        description=escape(t("meta.description")),
        title=escape(title),
        site_name=escape(site.SITE_NAME),
        head_links=_head_links(resolver, site, current_path, current),
        css_vars="        " + css_root_block().replace("\n", "\n        "),
        max_width=PAGE_SIZES["max"],
        min_width=PAGE_SIZES["min"],
        md=BREAKPOINTS["md"],
        home_href=escape(resolver.get_locale_path(locale, "/")),
        nav_label=escape(t("nav.label")),
        nav_items=_nav_items(t, locale, resolver, current),
        language_label=escape(t("nav.language")),
        language_items=_language_items(locale, resolver, current_path, current),
        body=body_html,
        phone=escape(CONTACT["PHONE"]),
        phone_label=escape(t("footer.phone")),
        instagram=escape(SOCIAL_MEDIA["INSTAGRAM"]),
        facebook=escape(SOCIAL_MEDIA["FACEBOOK"]),
        copyright=escape(t("footer.copyright", year=year, site_name=site.SITE_NAME)),
    )


def render_page(
    page: Page,
    t: TranslateFn,
    locale: str,
    resolver: LocaleResolver,
    site: SiteSettings,
) -> str:
    """Render a content page in a locale.

    Raises:
        TranslationNotFoundError: If a required string is missing from both
            the locale and the default locale.
    """
    current_path = resolver.get_locale_path(locale, page.url_path)
    return _render(
        title=t(page.title_key),
        body_html=_paragraphs(t(page.body_key)),
        t=t,
        locale=locale,
        resolver=resolver,
        site=site,
        current_path=current_path,
        current=page,
    )


def render_not_found(
    t: TranslateFn,
    locale: str,
    resolver: LocaleResolver,
    site: SiteSettings,
    requested_path: str,
) -> str:
    """Render the localized not-found page for a request path."""
    home = resolver.get_locale_path(locale, "/")
    body_html = "\n".join(
        [
            _paragraphs(t("errors.not_found.body")),
            f"            <p>{_link(home, t('errors.not_found.home_link'))}</p>",
        ]
    )
    return _render(
        title=t("errors.not_found.title"),
        body_html=body_html,
        t=t,
        locale=locale,
        resolver=resolver,
        site=site,
        current_path=resolver.get_locale_path(locale, requested_path),
        current=None,
    )


def all_page_paths(resolver: LocaleResolver) -> list[tuple[Page, dict[str, str]]]:
    """Every page with its path per published locale (used by the sitemap).

    Pages published in none of the supported locales are left out.
    """
    entries = []
    for page in SITE_PAGES:
        paths = dict(_published_links(resolver, page.url_path, page))
        if paths:
            entries.append((page, paths))
    return entries
