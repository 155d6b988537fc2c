"""Feature-level fixtures for i18n system tests.

Provides translation files on disk and registry/resolver/translator fixtures
built from them.
"""

import pytest
import yaml

from infrastructure.i18n import (
    LocaleConfig,
    LocaleResolver,
    Translator,
    YAMLTranslationLoader,
    build_registry,
)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - site.lt.yml
    - site.en.yml
    - pages.lt.yml
    - pages.en.yml
    """
    files = {
        "site.lt.yml": {
            "meta": {"language_name": "Lietuvių"},
            "nav": {"home": "Pradžia", "services": "Paslaugos"},
            "footer": {"copyright": "© {year} {site_name}"},
        },
        "site.en.yml": {
            "meta": {"language_name": "English"},
            "nav": {"home": "Home"},
            "footer": {"copyright": "© {{year}} {{site_name}}"},
        },
        "pages.lt.yml": {
            "pages": {
                "about": {"title": "Apie mus", "body": "Esame floristai."},
                "contact": {"title": "Kontaktai"},
            },
        },
        "pages.en.yml": {
            "pages": {
                "about": {"title": "About us", "body": "We are florists."},
            },
        },
    }
    for name, data in files.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def locale_config():
    return LocaleConfig(supported_locales=("lt", "en"), default_locale="lt")


@pytest.fixture
def registry(locale_config, yaml_loader):
    """Registry built from the temporary translation files."""
    return build_registry(locale_config, yaml_loader)


@pytest.fixture
def resolver(registry):
    return LocaleResolver(registry)


@pytest.fixture
def translator(registry, resolver):
    return Translator(registry, resolver)
