"""Tests for infrastructure.i18n.strategies module."""

import pytest

from infrastructure.i18n import (
    ExplicitOverrideStrategy,
    FirstSupportedStrategy,
    FixedFallbackStrategy,
    HostnameTldStrategy,
    LocaleConfigurationError,
    build_locale_config,
    resolve_default_locale,
)
from infrastructure.i18n.strategies import default_strategies, hostname_tld
from tests.factories import make_settings

SUPPORTED = ("lt", "en", "ru")


@pytest.mark.parametrize(
    "hostname,expected",
    [
        ("jaukuma.lt", "lt"),
        ("www.jaukuma.RU", "ru"),
        ("jaukuma.lt:8443", "lt"),
        ("jaukuma.lt.", "lt"),
        ("localhost", "localhost"),
        ("", ""),
        (None, ""),
    ],
)
def test_hostname_tld(hostname, expected):
    assert hostname_tld(hostname) == expected


class TestStrategies:
    def test_explicit_override_selects_supported_code(self):
        assert ExplicitOverrideStrategy("EN").select(SUPPORTED) == "en"

    def test_explicit_override_declines_unsupported_code(self):
        assert ExplicitOverrideStrategy("de").select(SUPPORTED) is None

    def test_explicit_override_declines_when_unset(self):
        assert ExplicitOverrideStrategy(None).select(SUPPORTED) is None

    def test_hostname_tld_selects_supported_tld(self):
        assert HostnameTldStrategy("jaukuma.ru").select(SUPPORTED) == "ru"

    def test_hostname_tld_declines_generic_tld(self):
        assert HostnameTldStrategy("test.com").select(SUPPORTED) is None

    def test_fixed_fallback_selects_lt_when_served(self):
        assert FixedFallbackStrategy().select(("en", "lt", "ru")) == "lt"

    def test_fixed_fallback_declines_when_lt_not_served(self):
        assert FixedFallbackStrategy().select(("en", "ru")) is None

    def test_first_supported(self):
        assert FirstSupportedStrategy().select(("en", "lt")) == "en"
        assert FirstSupportedStrategy().select(()) is None


class TestResolveDefaultLocale:
    def test_override_wins_over_hostname(self):
        chain = default_strategies("ru", "jaukuma.en")
        assert resolve_default_locale(chain, SUPPORTED) == "ru"

    def test_hostname_used_when_override_unsupported(self):
        chain = default_strategies("de", "jaukuma.en")
        assert resolve_default_locale(chain, SUPPORTED) == "en"

    def test_fixed_fallback_ignores_language_order(self):
        chain = default_strategies(None, "test.com")
        assert resolve_default_locale(chain, ("en", "lt", "ru")) == "lt"

    def test_first_supported_is_last_resort(self):
        chain = default_strategies(None, "test.com")
        assert resolve_default_locale(chain, ("ru", "en")) == "ru"

    def test_raises_when_every_strategy_declines(self):
        with pytest.raises(LocaleConfigurationError):
            resolve_default_locale(default_strategies(None, None), ())


class TestBuildLocaleConfig:
    def test_defaults(self):
        config = build_locale_config(make_settings())
        assert config.supported_locales == ("lt", "en", "ru")
        assert config.default_locale == "lt"
        assert config.hostname == "test.com"

    def test_languages_are_trimmed_and_empty_entries_dropped(self):
        config = build_locale_config(make_settings(languages=" en , ru,,"))
        assert config.supported_locales == ("en", "ru")
        assert config.default_locale == "en"

    def test_default_is_lt_whatever_the_language_order(self):
        config = build_locale_config(make_settings(languages="en,lt,ru"))
        assert config.supported_locales == ("en", "lt", "ru")
        assert config.default_locale == "lt"

    def test_default_from_production_hostname(self):
        config = build_locale_config(make_settings(prod_site="jaukuma.ru"))
        assert config.default_locale == "ru"

    def test_default_from_override(self):
        config = build_locale_config(make_settings(default_lang="en"))
        assert config.default_locale == "en"

    def test_empty_languages_raise(self):
        with pytest.raises(LocaleConfigurationError):
            build_locale_config(make_settings(languages=" , "))

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_locale_config(make_settings(languages=""))
