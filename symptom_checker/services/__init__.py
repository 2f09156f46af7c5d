"""Services for the AI Symptom Checker."""

from symptom_checker.services.analysis_gateway import AnalysisGateway, build_prompt, RESPONSE_SCHEMA
from symptom_checker.services.providers import AIProvider, GeminiProvider
from symptom_checker.services.session_store import SessionStore, get_session_store
from symptom_checker.services.symptom_flow import SymptomCheckerFlow
from symptom_checker.services.views import render

__all__ = [
    "AnalysisGateway",
    "build_prompt",
    "RESPONSE_SCHEMA",
    "AIProvider",
    "GeminiProvider",
    "SessionStore",
    "get_session_store",
    "SymptomCheckerFlow",
    "render",
]
