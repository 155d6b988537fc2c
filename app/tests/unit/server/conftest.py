"""Fixtures for server module unit tests."""

import pytest
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from infrastructure.i18n import LocaleResolver
from tests.factories import make_registry, make_settings


@pytest.fixture
def echo_router():
    """Router echoing what the middleware stored on the request."""
    router = APIRouter()

    @router.get("/api/state")
    def state(request: Request):
        return {"locale": getattr(request.state, "locale", None)}

    @router.get("/{path:path}", response_class=HTMLResponse)
    def page(path: str, request: Request):
        locale = getattr(request.state, "locale", None)
        return HTMLResponse(f"<p>{path}:{locale}</p>")

    return router


@pytest.fixture
def production_settings():
    return make_settings(prod_site="jaukuma.lt")


@pytest.fixture
def development_settings():
    return make_settings(prod_site="jaukuma.lt", mode="development")


@pytest.fixture
def site_resolver():
    return LocaleResolver(make_registry())
