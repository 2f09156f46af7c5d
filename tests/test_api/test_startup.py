"""
Tests for startup configuration checks.
"""

import pytest
from fastapi.testclient import TestClient

from symptom_checker import dependencies
from symptom_checker.config import Settings
from symptom_checker.core.exceptions import ConfigurationError
from symptom_checker.main import app


@pytest.fixture
def settings_without_key(monkeypatch):
    """Gateway factory sees settings with no provider credential."""
    dependencies.reset_analysis_gateway()
    monkeypatch.setattr(dependencies, "get_settings", lambda: Settings(GEMINI_API_KEY=None))
    yield
    dependencies.reset_analysis_gateway()


def test_gateway_factory_fails_without_key(settings_without_key):
    with pytest.raises(ConfigurationError):
        dependencies.get_analysis_gateway()


def test_application_refuses_to_start_without_key(settings_without_key):
    with pytest.raises(ConfigurationError):
        with TestClient(app):
            pass
