"""
Flow states for the consent -> form -> loading -> results cycle.

Each step is its own model and the union is discriminated on `step`, so a
results state always carries a result.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from symptom_checker.schemas.symptoms import AnalysisResult, PatientInput


class ConsentState(BaseModel):
    """Waiting for the user to accept the agreements."""
    step: Literal["consent"] = "consent"


class FormState(BaseModel):
    """Intake form, optionally showing the last error and the previous input."""
    step: Literal["form"] = "form"
    error: Optional[str] = Field(None, description="User-facing error from the last attempt")
    draft: Optional[PatientInput] = Field(None, description="Input kept after a failed attempt")


class LoadingState(BaseModel):
    """An analysis request is in flight."""
    step: Literal["loading"] = "loading"
    submitted: PatientInput
    started_at: datetime = Field(default_factory=datetime.utcnow)


class ResultsState(BaseModel):
    """Analysis finished successfully."""
    step: Literal["results"] = "results"
    result: AnalysisResult
    generated_at: datetime = Field(default_factory=datetime.utcnow)


FlowState = Annotated[
    Union[ConsentState, FormState, LoadingState, ResultsState],
    Field(discriminator="step"),
]
