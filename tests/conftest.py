"""
Pytest fixtures for AI Symptom Checker tests.
"""

import copy
import json
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

# Set environment variables before imports
import os
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["ANALYSIS_RATE_LIMIT"] = "1000/minute"
os.environ["DEBUG"] = "true"

from symptom_checker.config import Settings
from symptom_checker.dependencies import get_analysis_gateway, get_sessions
from symptom_checker.main import app
from symptom_checker.schemas.symptoms import PatientInput
from symptom_checker.services.analysis_gateway import AnalysisGateway
from symptom_checker.services.session_store import SessionStore


SAMPLE_ANALYSIS = {
    "ai_confidence": 82,
    "conditions_analyzed": 3,
    "urgency_level": "Medium",
    "recommendations": 2,
    "conditions": [
        {"name": "Flu", "probability": 40, "description": "Viral infection of the airways."},
        {"name": "Cold", "probability": 60, "description": "Mild upper respiratory infection."},
    ],
    "risk_assessment": [
        {"factor": "Age Factor", "value": 20},
        {"factor": "Symptom Severity", "value": 55},
    ],
    "symptom_analysis": {
        "severity": "Moderate",
        "duration_pattern": "Acute",
        "progression": "Stable",
    },
    "care_plan": [
        {"title": "Rest and hydrate", "description": "Drink fluids and sleep.", "type": "recommendation"},
        {"title": "Watch your fever", "description": "Seek care above 39.5C.", "type": "caution"},
    ],
    "timeline": [
        {"time": "24-48 Hours", "title": "Monitor", "description": "Track temperature twice a day."},
        {"time": "1 Week", "title": "Follow up", "description": "See a doctor if not improving."},
    ],
}


class StubProvider:
    """AI provider double returning canned text or raising."""

    def __init__(self, payload: Any = None, error: Optional[Exception] = None):
        self.payload = payload
        self.error = error
        self.calls: list[tuple[str, dict]] = []

    async def generate_json(self, prompt: str, schema: dict) -> str:
        self.calls.append((prompt, schema))
        if self.error is not None:
            raise self.error
        if isinstance(self.payload, str):
            return self.payload
        return json.dumps(self.payload)


@pytest.fixture
def sample_analysis() -> dict:
    """Schema-conformant provider answer (conditions deliberately unsorted)."""
    return copy.deepcopy(SAMPLE_ANALYSIS)


@pytest.fixture
def patient_input() -> PatientInput:
    """Complete intake record."""
    return PatientInput(
        age="35",
        gender="Male",
        severity="Moderate",
        description="headache and fever for 2 days",
        duration="1-3 days",
        history=""
    )


@pytest.fixture
def settings() -> Settings:
    """Settings with a provider credential."""
    return Settings(GEMINI_API_KEY="test-gemini-key")


@pytest.fixture
def make_provider():
    """Build a stub provider with a custom payload or error."""
    return StubProvider


@pytest.fixture
def stub_provider(sample_analysis: dict) -> StubProvider:
    return StubProvider(payload=sample_analysis)


@pytest.fixture
def failing_provider() -> StubProvider:
    return StubProvider(error=ConnectionError("provider unavailable"))


@pytest.fixture
def gateway(settings: Settings, stub_provider: StubProvider) -> AnalysisGateway:
    return AnalysisGateway(settings, provider=stub_provider)


@pytest.fixture
def failing_gateway(settings: Settings, failing_provider: StubProvider) -> AnalysisGateway:
    return AnalysisGateway(settings, provider=failing_provider)


@pytest.fixture
def session_store() -> SessionStore:
    return SessionStore(max_sessions=10)


@pytest.fixture
def test_client(gateway: AnalysisGateway, session_store: SessionStore):
    """Synchronous test client wired to the stub gateway."""
    app.dependency_overrides[get_analysis_gateway] = lambda: gateway
    app.dependency_overrides[get_sessions] = lambda: session_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(failing_gateway: AnalysisGateway, session_store: SessionStore):
    """Test client whose provider always fails."""
    app.dependency_overrides[get_analysis_gateway] = lambda: failing_gateway
    app.dependency_overrides[get_sessions] = lambda: session_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def intake_payload(patient_input: PatientInput) -> dict:
    return patient_input.model_dump()
