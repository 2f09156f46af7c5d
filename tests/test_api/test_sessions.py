"""
Tests for the flow session endpoints.
"""

import pytest
from fastapi.testclient import TestClient

ALL_AGREED = {"medical_disclaimer": True, "privacy_policy": True, "age_verification": True}


def _start(client: TestClient) -> str:
    response = client.post("/api/v1/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


def _start_on_form(client: TestClient) -> str:
    session_id = _start(client)
    response = client.post(f"/api/v1/sessions/{session_id}/consent", json=ALL_AGREED)
    assert response.status_code == 200
    return session_id


def test_new_session_shows_consent(test_client: TestClient):
    response = test_client.post("/api/v1/sessions")

    assert response.status_code == 201
    data = response.json()

    assert data["view"]["step"] == "consent"
    assert len(data["view"]["agreements"]) == 3
    assert "not constitute medical advice" in data["disclaimer"]


@pytest.mark.parametrize("missing", ["medical_disclaimer", "privacy_policy", "age_verification"])
def test_consent_requires_every_agreement(test_client: TestClient, missing: str):
    session_id = _start(test_client)

    response = test_client.post(
        f"/api/v1/sessions/{session_id}/consent",
        json={**ALL_AGREED, missing: False}
    )

    assert response.status_code == 400
    assert test_client.get(f"/api/v1/sessions/{session_id}").json()["view"]["step"] == "consent"


def test_consent_shows_empty_form(test_client: TestClient):
    session_id = _start(test_client)

    response = test_client.post(f"/api/v1/sessions/{session_id}/consent", json=ALL_AGREED)
    view = response.json()["view"]

    assert view["step"] == "form"
    assert view["can_submit"] is False
    assert view["error"] is None


def test_analyze_before_consent_conflicts(test_client: TestClient, intake_payload: dict):
    session_id = _start(test_client)

    response = test_client.post(f"/api/v1/sessions/{session_id}/analyze", json=intake_payload)

    assert response.status_code == 409


def test_full_cycle(test_client: TestClient, intake_payload: dict):
    session_id = _start_on_form(test_client)

    response = test_client.post(f"/api/v1/sessions/{session_id}/analyze", json=intake_payload)

    assert response.status_code == 200
    view = response.json()["view"]
    assert view["step"] == "results"
    assert [t["name"] for t in view["tabs"]] == ["Conditions", "Analysis", "Care Plan", "Timeline"]
    conditions = view["tabs"][0]["sections"][0]["items"]
    assert [c["label"] for c in conditions] == ["Cold", "Flu"]

    response = test_client.post(f"/api/v1/sessions/{session_id}/new-analysis")

    view = response.json()["view"]
    assert view["step"] == "form"
    assert view["error"] is None
    assert view["draft"]["age"] == ""


def test_incomplete_submission_keeps_form(test_client: TestClient, intake_payload: dict):
    session_id = _start_on_form(test_client)
    intake_payload["severity"] = ""

    response = test_client.post(f"/api/v1/sessions/{session_id}/analyze", json=intake_payload)

    assert response.status_code == 400
    assert response.json()["detail"]["missing_fields"] == ["severity"]
    assert test_client.get(f"/api/v1/sessions/{session_id}").json()["view"]["step"] == "form"


def test_provider_failure_returns_form_with_error(failing_client: TestClient, intake_payload: dict):
    session_id = _start_on_form(failing_client)

    response = failing_client.post(f"/api/v1/sessions/{session_id}/analyze", json=intake_payload)

    assert response.status_code == 200
    view = response.json()["view"]
    assert view["step"] == "form"
    assert "AI provider may be busy" in view["error"]
    assert view["draft"]["description"] == intake_payload["description"]
    assert view["can_submit"] is True


def test_new_analysis_outside_results_conflicts(test_client: TestClient):
    session_id = _start_on_form(test_client)

    response = test_client.post(f"/api/v1/sessions/{session_id}/new-analysis")

    assert response.status_code == 409


def test_unknown_session(test_client: TestClient):
    assert test_client.get("/api/v1/sessions/nope").status_code == 404
    assert test_client.post("/api/v1/sessions/nope/new-analysis").status_code == 404
    assert test_client.delete("/api/v1/sessions/nope").status_code == 404


def test_delete_session(test_client: TestClient):
    session_id = _start(test_client)

    assert test_client.delete(f"/api/v1/sessions/{session_id}").status_code == 204
    assert test_client.get(f"/api/v1/sessions/{session_id}").status_code == 404
