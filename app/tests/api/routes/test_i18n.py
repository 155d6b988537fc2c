"""Tests for the locale API."""

import pytest

from api.routes.i18n import router


@pytest.fixture
def client(make_route_client):
    return make_route_client(router)


def test_list_locales(client):
    response = client.get("/i18n/locales")

    assert response.status_code == 200
    assert response.json() == {
        "locales": ["lt", "en", "ru"],
        "default": "lt",
        "names": {"lt": "Lietuvių", "en": "English", "ru": "Русский"},
    }


def test_get_translations_returns_flat_dictionary(client):
    response = client.get("/i18n/en")

    assert response.status_code == 200
    body = response.json()
    assert body["nav.home"] == "Home"
    assert body["pages.about.title"] == "About us"
    assert body["meta.language_name"] == "English"


def test_get_translations_for_unsupported_locale_returns_404(client):
    response = client.get("/i18n/de")

    assert response.status_code == 404
    assert response.json() == {"detail": "Locale not supported: de"}
