"""
UI-Optimized View Models

Pure-data renderings of each flow step for the browser front end. Styling
is left to the client; the models only carry content, ordering, colours
and badge variants.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from symptom_checker.schemas.symptoms import PatientInput


# ============================================================================
# BASE UI COMPONENTS
# ============================================================================

class BadgeInfo(BaseModel):
    """UI badge component data."""
    text: str = Field(..., description="Badge display text")
    variant: str = Field(..., description="Badge variant: success, warning, danger, critical, info")


class SectionItem(BaseModel):
    """Individual item within a UI section."""
    label: str = Field(..., description="Item label")
    value: str = Field(..., description="Item value/content")
    explanation: Optional[str] = Field(None, description="Detailed explanation")
    badge: Optional[BadgeInfo] = Field(None, description="Optional badge")
    probability: Optional[float] = Field(None, description="Probability percentage")
    score: Optional[float] = Field(None, description="Score value for bar charts")
    color: Optional[str] = Field(None, description="Hex colour for charts")


class UISection(BaseModel):
    """Grouped section for UI card rendering."""
    title: str = Field(..., description="Section title")
    icon: Optional[str] = Field(None, description="Icon name for section")
    items: list[SectionItem] = Field(default_factory=list, description="Section items")


class ReportTab(BaseModel):
    """One tab of the results report."""
    name: str = Field(..., description="Tab label")
    sections: list[UISection] = Field(default_factory=list)


class HeaderCard(BaseModel):
    """Summary card in the results header."""
    title: str
    value: str
    icon: str
    theme: str = Field(..., description="blue, purple, green or urgency")
    badge: Optional[BadgeInfo] = None


class FeatureCard(BaseModel):
    """Trust feature shown on the consent screen."""
    title: str
    description: str
    icon: str


class AgreementItem(BaseModel):
    """Checkbox on the consent screen."""
    key: str = Field(..., description="Field name in ConsentAgreement")
    title: str
    text: str


class FormOption(BaseModel):
    value: str
    label: str


class FormField(BaseModel):
    """Intake form field descriptor."""
    name: str
    label: str
    kind: Literal["number", "choice", "select", "textarea", "text"]
    required: bool = True
    placeholder: Optional[str] = None
    options: list[FormOption] = Field(default_factory=list)


# ============================================================================
# STEP VIEWS
# ============================================================================

class ConsentView(BaseModel):
    step: Literal["consent"] = "consent"
    title: str
    subtitle: str
    features: list[FeatureCard]
    agreements: list[AgreementItem]
    action: str = "Agree & Continue"


class FormView(BaseModel):
    step: Literal["form"] = "form"
    title: str
    subtitle: str
    fields: list[FormField]
    draft: PatientInput = Field(default_factory=PatientInput)
    error: Optional[str] = None
    missing_fields: list[str] = Field(default_factory=list)
    can_submit: bool = False


class LoadingView(BaseModel):
    step: Literal["loading"] = "loading"
    message: str


class ResultsView(BaseModel):
    step: Literal["results"] = "results"
    title: str = "AI Diagnosis Analysis"
    generated_at: Optional[datetime] = None
    header: list[HeaderCard] = Field(default_factory=list)
    tabs: list[ReportTab] = Field(default_factory=list)
    placeholder: Optional[str] = Field(None, description="Shown instead of the report when no result exists")


FlowView = Annotated[
    Union[ConsentView, FormView, LoadingView, ResultsView],
    Field(discriminator="step"),
]


class SessionResponse(BaseModel):
    """Current view of a flow session."""
    session_id: str
    view: FlowView
    disclaimer: str = Field(
        default=(
            "This tool is for informational purposes only and does not constitute "
            "medical advice. Consult a healthcare professional for any medical concerns."
        )
    )
