"""Tests for the ASGI entry point."""

import pytest
from fastapi.testclient import TestClient

import main
from server import server


@pytest.mark.unit
def test_entry_point_is_the_site_application():
    assert main.server_app is server.handler
    assert main.server_app.title == "Jaukuma"


@pytest.mark.unit
def test_entry_point_answers_health_checks():
    response = TestClient(main.server_app).get("/health")
    assert response.json() == {"status": "ok"}
