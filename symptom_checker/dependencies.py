"""
FastAPI dependency injection utilities.
"""

from typing import Optional

from symptom_checker.config import get_settings
from symptom_checker.services.analysis_gateway import AnalysisGateway
from symptom_checker.services.session_store import SessionStore, get_session_store


# Global gateway, built once at startup
_gateway: Optional[AnalysisGateway] = None


def get_analysis_gateway() -> AnalysisGateway:
    """
    Get the analysis gateway.

    Raises:
        ConfigurationError: If the AI provider credential is missing.
    """
    global _gateway
    if _gateway is None:
        _gateway = AnalysisGateway(get_settings())
    return _gateway


def reset_analysis_gateway() -> None:
    """Drop the gateway on shutdown."""
    global _gateway
    _gateway = None


def get_sessions() -> SessionStore:
    """Get the in-memory session store."""
    return get_session_store()


__all__ = [
    "get_analysis_gateway",
    "reset_analysis_gateway",
    "get_sessions",
]
