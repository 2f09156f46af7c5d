"""
Step rendering. `render` is a pure function of the flow state.
"""

from symptom_checker.schemas.flow import (
    ConsentState,
    FlowState,
    FormState,
    LoadingState,
    ResultsState,
)
from symptom_checker.schemas.symptoms import (
    DURATION_OPTIONS,
    GENDER_OPTIONS,
    SEVERITY_OPTIONS,
    PatientInput,
)
from symptom_checker.schemas.views import (
    AgreementItem,
    ConsentView,
    FeatureCard,
    FlowView,
    FormField,
    FormOption,
    FormView,
    LoadingView,
)
from symptom_checker.services.report_builder import build_results_view

CONSENT_FEATURES = [
    FeatureCard(title="HIPAA Compliant", description="Data Protection", icon="shield"),
    FeatureCard(title="SSL Encrypted", description="Secure Connection", icon="lock"),
    FeatureCard(title="Privacy First", description="No Data Sharing", icon="eye"),
    FeatureCard(title="Audit Ready", description="Compliance Logs", icon="document"),
]

CONSENT_AGREEMENTS = [
    AgreementItem(
        key="medical_disclaimer",
        title="Medical Disclaimer Agreement",
        text=(
            "I understand this is not a substitute for professional medical advice "
            "and will consult healthcare providers for medical concerns."
        )
    ),
    AgreementItem(
        key="privacy_policy",
        title="Data Privacy & HIPAA Compliance",
        text=(
            "I consent to the processing of my health information in accordance "
            "with HIPAA regulations and our privacy policy."
        )
    ),
    AgreementItem(
        key="age_verification",
        title="Age Verification",
        text="I confirm that I am over 18 years of age or have parental consent to use this service."
    ),
]


def _options(values: list[str]) -> list[FormOption]:
    return [FormOption(value=v, label=v) for v in values]


FORM_FIELDS = [
    FormField(name="age", label="Age", kind="number", placeholder="e.g., 35"),
    FormField(name="gender", label="Gender", kind="choice", options=_options(GENDER_OPTIONS)),
    FormField(name="severity", label="Symptom Severity", kind="choice", options=_options(SEVERITY_OPTIONS)),
    FormField(
        name="description",
        label="Symptom Description",
        kind="textarea",
        placeholder=(
            "Describe your symptoms in detail... (e.g., headache, fever, cough, duration, "
            "when it started, what makes it better or worse)"
        )
    ),
    FormField(
        name="duration",
        label="Duration",
        kind="select",
        placeholder="How long have you had these symptoms?",
        options=_options(DURATION_OPTIONS)
    ),
    FormField(
        name="history",
        label="Medical History (Optional)",
        kind="text",
        required=False,
        placeholder="Any relevant conditions or medications"
    ),
]

LOADING_MESSAGE = "Analyzing your symptoms with AI. This may take a few moments..."


def render_form(state: FormState) -> FormView:
    """Form view; submission is enabled only when every required field is filled."""
    draft = state.draft or PatientInput()
    missing = draft.missing_fields()
    return FormView(
        title="Describe Your Symptoms",
        subtitle="Provide detailed information about your symptoms for accurate AI analysis.",
        fields=FORM_FIELDS,
        draft=draft,
        error=state.error,
        missing_fields=missing,
        can_submit=not missing
    )


def render(state: FlowState) -> FlowView:
    """Render the current step."""
    if isinstance(state, ConsentState):
        return ConsentView(
            title="Welcome to Your AI Health Assistant",
            subtitle=(
                "Securely check your symptoms and receive professional-grade "
                "analysis and recommendations."
            ),
            features=CONSENT_FEATURES,
            agreements=CONSENT_AGREEMENTS
        )
    if isinstance(state, FormState):
        return render_form(state)
    if isinstance(state, LoadingState):
        return LoadingView(message=LOADING_MESSAGE)
    if isinstance(state, ResultsState):
        return build_results_view(state.result, state.generated_at)

    # Unknown state: fall back to the first step
    return render(ConsentState())
