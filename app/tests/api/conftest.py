"""Fixtures for API route tests.

Routes run against the bundled translations with settings built in the test,
never the process environment.
"""

import pytest
from fastapi.testclient import TestClient

from infrastructure.i18n import LocaleResolver, Translator, create_registry
from infrastructure.services import (
    get_locale_registry,
    get_locale_resolver,
    get_settings,
    get_translator,
)
from tests.factories import make_settings
from utils.tests import create_test_app


@pytest.fixture
def site_settings():
    return make_settings(prod_site="jaukuma.lt")


@pytest.fixture
def site_registry(site_settings):
    return create_registry(site_settings, use_cache=False)


@pytest.fixture
def dependency_overrides(site_settings, site_registry):
    resolver = LocaleResolver(site_registry)
    translator = Translator(site_registry, resolver)
    return {
        get_settings: lambda: site_settings,
        get_locale_registry: lambda: site_registry,
        get_locale_resolver: lambda: resolver,
        get_translator: lambda: translator,
    }


@pytest.fixture
def make_route_client(dependency_overrides):
    """Build a TestClient for routers with the site dependencies overridden."""

    def _make(*routers):
        app = create_test_app(list(routers), dependency_overrides=dependency_overrides)
        return TestClient(app, follow_redirects=False)

    return _make
