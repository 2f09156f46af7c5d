"""
Tests for the sanitized error response.
"""

import pytest
from fastapi.testclient import TestClient

from symptom_checker.dependencies import get_sessions
from symptom_checker.main import app


def _broken_store():
    raise RuntimeError("store exploded with secret detail")


@pytest.fixture
def broken_client():
    app.dependency_overrides[get_sessions] = _broken_store
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def test_unhandled_error_returns_error_response(broken_client: TestClient):
    response = broken_client.get("/api/v1/sessions/anything")

    assert response.status_code == 500
    data = response.json()

    assert data["error"] == "InternalServerError"
    assert data["message"] == "An unexpected error occurred"
    assert "timestamp" in data
    assert "secret" not in response.text


def test_api_routes_declare_error_response():
    paths = app.openapi()["paths"]

    for path, method in [
        ("/api/v1/analysis", "post"),
        ("/api/v1/sessions", "post"),
        ("/api/v1/sessions/{session_id}/analyze", "post"),
    ]:
        error = paths[path][method]["responses"]["500"]
        assert error["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
