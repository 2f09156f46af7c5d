"""Pydantic schemas for request/response validation."""

from symptom_checker.schemas.common import ErrorResponse, HealthResponse
from symptom_checker.schemas.flow import (
    ConsentState,
    FlowState,
    FormState,
    LoadingState,
    ResultsState,
)
from symptom_checker.schemas.symptoms import (
    AnalysisResult,
    CarePlanItem,
    CarePlanType,
    Condition,
    ConsentAgreement,
    PatientInput,
    RiskFactor,
    SymptomAnalysis,
    TimelineItem,
    UrgencyLevel,
)
from symptom_checker.schemas.views import (
    ConsentView,
    FlowView,
    FormView,
    LoadingView,
    ReportTab,
    ResultsView,
    SessionResponse,
)

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Domain
    "AnalysisResult",
    "CarePlanItem",
    "CarePlanType",
    "Condition",
    "ConsentAgreement",
    "PatientInput",
    "RiskFactor",
    "SymptomAnalysis",
    "TimelineItem",
    "UrgencyLevel",
    # Flow
    "ConsentState",
    "FlowState",
    "FormState",
    "LoadingState",
    "ResultsState",
    # Views
    "ConsentView",
    "FlowView",
    "FormView",
    "LoadingView",
    "ReportTab",
    "ResultsView",
    "SessionResponse",
]
