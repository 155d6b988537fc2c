from fastapi.testclient import TestClient

from api.routes.system import router as system_router
from infrastructure.services import get_settings
from tests.factories import make_settings
from utils.tests import create_test_app

client = TestClient(create_test_app(system_router))


def test_get_version_unknown():
    response = client.get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "Unknown"}


def test_get_version_known():
    app = create_test_app(
        system_router,
        dependency_overrides={get_settings: lambda: make_settings(git_sha="foo")},
    )
    response = TestClient(app).get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "foo"}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
