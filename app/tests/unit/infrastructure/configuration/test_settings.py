"""Unit tests for infrastructure.configuration modules.

Tests cover:
- I18nSettings parsing of LANGUAGES and DEFAULT_LANG
- SiteSettings hostname normalization and development mode
- ServerSettings defaults
- Settings aggregation and is_production
"""

import pytest

from infrastructure.configuration import (
    I18nSettings,
    ServerSettings,
    Settings,
    SiteSettings,
)
from infrastructure.configuration.base import split_csv


@pytest.mark.unit
class TestI18nSettings:
    def test_defaults(self):
        settings = I18nSettings()
        assert settings.languages == ["lt", "en", "ru"]
        assert settings.DEFAULT_LANG is None
        assert settings.TRANSLATIONS_DIR is None

    def test_languages_from_environment(self, monkeypatch):
        monkeypatch.setenv("LANGUAGES", " EN, ru ,, en ")
        assert I18nSettings().languages == ["en", "ru"]

    def test_blank_default_lang_is_unset(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LANG", "   ")
        assert I18nSettings().DEFAULT_LANG is None

    def test_default_lang_is_normalized(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_LANG", " RU ")
        assert I18nSettings().DEFAULT_LANG == "ru"


@pytest.mark.unit
class TestSiteSettings:
    def test_defaults(self):
        settings = SiteSettings()
        assert settings.PROD_SITE == "test.com"
        assert settings.is_development is False
        assert settings.canonical_host == "www.test.com"
        assert settings.canonical_origin == "https://www.test.com"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("https://jaukuma.lt/", "jaukuma.lt"),
            ("http://Jaukuma.LT", "jaukuma.lt"),
            ("jaukuma.lt", "jaukuma.lt"),
            ("", "test.com"),
        ],
    )
    def test_prod_site_is_normalized(self, monkeypatch, value, expected):
        monkeypatch.setenv("PROD_SITE", value)
        assert SiteSettings().PROD_SITE == expected

    def test_canonical_host_keeps_existing_www(self, monkeypatch):
        monkeypatch.setenv("PROD_SITE", "www.jaukuma.lt")
        assert SiteSettings().canonical_host == "www.jaukuma.lt"

    def test_development_mode(self, monkeypatch):
        monkeypatch.setenv("MODE", "Development")
        assert SiteSettings().is_development is True


@pytest.mark.unit
class TestServerSettings:
    def test_defaults(self):
        settings = ServerSettings()
        assert settings.CANONICAL_REDIRECT_ENABLED is True
        assert settings.APEX_DOMAIN is None
        assert settings.allowed_origins == [
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]

    def test_apex_domain_from_environment(self, monkeypatch):
        monkeypatch.setenv("APEX_DOMAIN", " Jaukuma.LT ")
        monkeypatch.setenv("CANONICAL_REDIRECT_ENABLED", "false")
        settings = ServerSettings()
        assert settings.APEX_DOMAIN == "jaukuma.lt"
        assert settings.CANONICAL_REDIRECT_ENABLED is False


@pytest.mark.unit
class TestSettings:
    def test_builds_all_sections(self):
        settings = Settings()
        assert isinstance(settings.i18n, I18nSettings)
        assert isinstance(settings.site, SiteSettings)
        assert isinstance(settings.server, ServerSettings)

    def test_explicit_sections_are_kept(self):
        site = SiteSettings(PROD_SITE="jaukuma.lt")
        assert Settings(site=site).site is site

    def test_is_production_by_default(self):
        assert Settings().is_production is True

    def test_prefix_marks_non_production(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_development_mode_marks_non_production(self, monkeypatch):
        monkeypatch.setenv("MODE", "development")
        assert Settings().is_production is False

    def test_model_dump_groups_sections(self):
        dumped = Settings().model_dump()
        assert {"i18n", "site", "server"} <= set(dumped)
        assert dumped["i18n"]["LANGUAGES"] == "lt,en,ru"


@pytest.mark.parametrize(
    "value,expected",
    [(" lt, en ,,ru ", ["lt", "en", "ru"]), ("", []), (None, [])],
)
def test_split_csv(value, expected):
    assert split_csv(value) == expected
