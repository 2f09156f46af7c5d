"""
Rate limiting configuration using SlowAPI.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from symptom_checker.config import get_settings

# Keyed by client address; there is no authentication to key on.
limiter = Limiter(key_func=get_remote_address)


def get_analysis_rate_limit() -> str:
    """Rate limit string for calls that reach the AI provider."""
    return get_settings().ANALYSIS_RATE_LIMIT


def get_session_create_rate_limit() -> str:
    """Rate limit string for opening new flow sessions."""
    return get_settings().SESSION_CREATE_RATE_LIMIT
