"""
Symptom Checker Domain Schemas

Patient intake record submitted by the form and the structured analysis
returned by the AI provider.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


# ============================================================================
# ENUMS
# ============================================================================

class UrgencyLevel(str, Enum):
    """Urgency level for seeking medical attention."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class CarePlanType(str, Enum):
    """Kind of care plan item."""
    RECOMMENDATION = "recommendation"
    CAUTION = "caution"


# ============================================================================
# FORM OPTIONS - Values offered by the intake form
# ============================================================================

GENDER_OPTIONS = ["Male", "Female", "Other"]

SEVERITY_OPTIONS = ["Mild", "Moderate", "Severe", "Very Severe"]

DURATION_OPTIONS = [
    "Less than a day",
    "1-3 days",
    "3-7 days",
    "1-2 weeks",
    "More than 2 weeks",
]

REQUIRED_FIELDS = ("age", "gender", "severity", "description", "duration")


# ============================================================================
# PATIENT INPUT
# ============================================================================

class PatientInput(BaseModel):
    """Self-reported symptom record. Frozen once submitted."""

    age: str = Field(default="", description="Age in years, as entered")
    gender: str = Field(default="", description="Male, Female or Other")
    severity: str = Field(default="", description="Mild, Moderate, Severe or Very Severe")
    description: str = Field(default="", description="Free-text description of the symptoms")
    duration: str = Field(default="", description="Duration bucket, e.g. '1-3 days'")
    history: str = Field(default="", description="Relevant medical history (optional)")

    @field_validator("age", "gender", "severity", "description", "duration", "history", mode="before")
    @classmethod
    def coerce_browser_values(cls, v: Any) -> Any:
        """Browsers may post numbers (age) or null for an untouched field."""
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    def missing_fields(self) -> list[str]:
        """Names of required fields that are empty or whitespace only."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name).strip()]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "age": "35",
                "gender": "Male",
                "severity": "Moderate",
                "description": "headache and fever for 2 days",
                "duration": "1-3 days",
                "history": ""
            }
        }


class ConsentAgreement(BaseModel):
    """The three agreements of the consent gate."""

    medical_disclaimer: bool = Field(default=False, description="Not a substitute for medical advice")
    privacy_policy: bool = Field(default=False, description="Consent to processing of health information")
    age_verification: bool = Field(default=False, description="Over 18 or parental consent")

    @property
    def all_consented(self) -> bool:
        return self.medical_disclaimer and self.privacy_policy and self.age_verification


# ============================================================================
# ANALYSIS RESULT - Structured answer from the AI provider
# ============================================================================

class Condition(BaseModel):
    """Potential condition with its probability."""
    name: str = Field(..., description="Name of the condition")
    probability: float = Field(..., description="Probability of the condition from 0 to 100")
    description: str = Field(..., description="Brief description of the condition")


class RiskFactor(BaseModel):
    """Scored risk factor."""
    factor: str = Field(..., description="Risk factor, e.g. Age Factor")
    value: float = Field(..., description="Score from 0 to 100")


class SymptomAnalysis(BaseModel):
    """Categorised symptom labels chosen by the AI."""
    severity: str = Field(..., description="Categorized severity, e.g. Moderate")
    duration_pattern: str = Field(..., description="Duration pattern, e.g. Acute")
    progression: str = Field(..., description="Progression, e.g. Stable")


class CarePlanItem(BaseModel):
    """Actionable care plan step."""
    title: str = Field(..., description="Title of the care plan item")
    description: str = Field(..., description="Detailed description")
    type: CarePlanType = Field(..., description="recommendation or caution")


class TimelineItem(BaseModel):
    """Follow-up timeline event."""
    time: str = Field(..., description="Timeframe, e.g. 24-48 Hours")
    title: str = Field(..., description="Title of the event")
    description: str = Field(..., description="What to do in this timeframe")


class AnalysisResult(BaseModel):
    """Complete AI analysis consumed by the results report."""

    ai_confidence: float = Field(..., description="AI confidence in the analysis (0-100)")
    conditions_analyzed: int = Field(..., description="Number of potential conditions analyzed")
    urgency_level: UrgencyLevel = Field(..., description="Urgency for seeking medical care")
    recommendations: int = Field(..., description="Number of recommendations in the care plan")
    conditions: list[Condition] = Field(..., description="Possible conditions")
    risk_assessment: list[RiskFactor] = Field(..., description="Scored risk factors")
    symptom_analysis: SymptomAnalysis = Field(..., description="Symptom categorisation")
    care_plan: list[CarePlanItem] = Field(..., description="Personalised care plan")
    timeline: list[TimelineItem] = Field(..., description="Suggested follow-up timeline")

    def sorted_by_probability(self) -> "AnalysisResult":
        """Copy with conditions in descending probability; ties keep their order."""
        ordered = sorted(self.conditions, key=lambda c: c.probability, reverse=True)
        return self.model_copy(update={"conditions": ordered})
