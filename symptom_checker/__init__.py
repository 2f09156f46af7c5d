"""AI Symptom Checker: consent, intake form and AI-generated health report."""

__version__ = "1.0.0"
