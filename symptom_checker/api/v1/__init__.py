"""API v1 routes."""

from symptom_checker.api.v1 import analysis, health, sessions

__all__ = ["analysis", "health", "sessions"]
