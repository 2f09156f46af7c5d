"""
Exception hierarchy for the AI Symptom Checker.
"""


class SymptomCheckerError(Exception):
    """Base class for all service errors."""


class ConfigurationError(SymptomCheckerError):
    """Required configuration is missing; the service must not start."""


class AnalysisFailedError(SymptomCheckerError):
    """
    The AI provider could not produce a usable analysis.

    Transport, authentication, rate limiting and malformed responses are
    deliberately collapsed into this single kind.
    """

    def __init__(self, message: str = "Failed to get analysis from the AI provider.") -> None:
        super().__init__(message)


class IncompleteSubmissionError(SymptomCheckerError):
    """A required intake field is empty."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = list(missing_fields)
        super().__init__(f"Missing required fields: {', '.join(self.missing_fields)}")


class InvalidTransitionError(SymptomCheckerError):
    """An action is not allowed in the current flow step."""

    def __init__(self, step: str, action: str) -> None:
        self.step = step
        self.action = action
        super().__init__(f"Action '{action}' is not allowed in step '{step}'")


class SessionNotFoundError(SymptomCheckerError):
    """No flow session exists under the given id."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")
