"""Core modules for the AI Symptom Checker."""

from symptom_checker.core.exceptions import (
    AnalysisFailedError,
    ConfigurationError,
    IncompleteSubmissionError,
    InvalidTransitionError,
    SessionNotFoundError,
    SymptomCheckerError,
)
from symptom_checker.core.logging import get_logger, setup_logging
from symptom_checker.core.rate_limit import (
    get_analysis_rate_limit,
    get_session_create_rate_limit,
    limiter,
)

__all__ = [
    "AnalysisFailedError",
    "ConfigurationError",
    "IncompleteSubmissionError",
    "InvalidTransitionError",
    "SessionNotFoundError",
    "SymptomCheckerError",
    "get_logger",
    "setup_logging",
    "limiter",
    "get_analysis_rate_limit",
    "get_session_create_rate_limit",
]
