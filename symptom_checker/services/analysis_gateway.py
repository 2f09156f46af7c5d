"""
Analysis Gateway

Builds the prompt from a patient's intake record, calls the AI provider
with a strict response schema, validates the JSON answer and orders the
conditions by probability.
"""

import time
from typing import Any, Optional

from symptom_checker.config import Settings
from symptom_checker.core.exceptions import AnalysisFailedError, ConfigurationError
from symptom_checker.core.logging import get_logger
from symptom_checker.core.metrics import ANALYSES_TOTAL, ANALYSIS_DURATION
from symptom_checker.schemas.symptoms import (
    AnalysisResult,
    CarePlanType,
    PatientInput,
    UrgencyLevel,
)
from symptom_checker.services.providers import AIProvider, GeminiProvider

logger = get_logger(__name__)


# ============================================================================
# RESPONSE SCHEMA - Declared output contract for the provider
# ============================================================================

def _string(description: str, enum: Optional[list[str]] = None) -> dict[str, Any]:
    field: dict[str, Any] = {"type": "STRING", "description": description}
    if enum:
        field["enum"] = enum
    return field


def _object(properties: dict[str, Any], description: Optional[str] = None) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "type": "OBJECT",
        "properties": properties,
        "required": list(properties),
    }
    if description:
        schema["description"] = description
    return schema


def _array(items: dict[str, Any], description: str) -> dict[str, Any]:
    return {"type": "ARRAY", "description": description, "items": items}


RESPONSE_SCHEMA: dict[str, Any] = _object({
    "ai_confidence": {
        "type": "NUMBER",
        "description": "AI's confidence in the analysis from 0 to 100.",
    },
    "conditions_analyzed": {
        "type": "INTEGER",
        "description": "Total number of potential conditions analyzed.",
    },
    "urgency_level": _string(
        "Urgency level for seeking medical attention.",
        enum=[level.value for level in UrgencyLevel],
    ),
    "recommendations": {
        "type": "INTEGER",
        "description": "Number of recommendations in the care plan.",
    },
    "conditions": _array(
        _object({
            "name": _string("Name of the condition."),
            "probability": {
                "type": "NUMBER",
                "description": "Probability of the condition from 0 to 100.",
            },
            "description": _string("A brief description of the condition."),
        }),
        "A list of potential medical conditions, sorted by probability.",
    ),
    "risk_assessment": _array(
        _object({
            "factor": _string("The risk factor (e.g., Age Factor, Symptom Severity)."),
            "value": {
                "type": "NUMBER",
                "description": "A numerical score from 0-100 for the risk factor.",
            },
        }),
        "Assessment of risk factors based on user input.",
    ),
    "symptom_analysis": _object({
        "severity": _string("Categorized severity (e.g., Moderate)."),
        "duration_pattern": _string("Pattern of symptom duration (e.g., Acute)."),
        "progression": _string("Symptom progression (e.g., Stable)."),
    }),
    "care_plan": _array(
        _object({
            "title": _string("Title of the care plan item."),
            "description": _string("Detailed description of the recommendation."),
            "type": _string(
                "Type of care plan item.",
                enum=[kind.value for kind in CarePlanType],
            ),
        }),
        "A personalized care plan with actionable steps.",
    ),
    "timeline": _array(
        _object({
            "time": _string("Timeframe for the timeline event (e.g., 24-48 Hours)."),
            "title": _string("Title of the timeline event."),
            "description": _string("Description of what to do in this timeframe."),
        }),
        "A suggested follow-up timeline.",
    ),
})


# ============================================================================
# PROMPT
# ============================================================================

NO_HISTORY = "None provided"


def build_prompt(patient: PatientInput) -> str:
    """Compose the analysis instruction, embedding every intake field verbatim."""
    history = patient.history or NO_HISTORY
    return (
        "You are an advanced medical AI assistant. Analyze the following patient "
        "symptoms and provide a professional-grade analysis. Your response must be "
        "in JSON format and conform to the provided schema.\n"
        "Patient Information:\n"
        f"- Age: {patient.age}\n"
        f"- Gender: {patient.gender}\n"
        f"- Symptom Severity: {patient.severity}\n"
        f"- Symptom Duration: {patient.duration}\n"
        f"- Symptoms Description: {patient.description}\n"
        f"- Relevant Medical History: {history}\n"
        "Analysis tasks:\n"
        "1. Provide a list of 3-4 possible conditions with their probability. "
        "The sum of probabilities should be close to 100.\n"
        "2. Assess the urgency level for seeking medical care.\n"
        "3. Generate a risk assessment based on the provided factors.\n"
        "4. Create a personalized care plan with clear, actionable recommendations.\n"
        "5. Suggest a follow-up timeline.\n"
        "6. The overall AI confidence should reflect the quality and specificity "
        "of the input data.\n"
        "IMPORTANT: Provide only the JSON object in your response. Do not include "
        "any explanatory text before or after the JSON."
    )


# ============================================================================
# GATEWAY
# ============================================================================

class AnalysisGateway:
    """
    Mediates between a PatientInput and the AI provider.

    Stateless across calls. Any failure, whether transport, authentication
    or an answer that does not match RESPONSE_SCHEMA, surfaces as a single
    AnalysisFailedError.
    """

    def __init__(self, settings: Settings, provider: Optional[AIProvider] = None):
        if not settings.GEMINI_API_KEY:
            raise ConfigurationError(
                "GEMINI_API_KEY environment variable is not set. "
                "The symptom checker cannot start without AI provider credentials."
            )
        self.model_name = settings.GEMINI_MODEL
        self._provider = provider or GeminiProvider(settings.GEMINI_API_KEY, settings.GEMINI_MODEL)

    async def analyze(self, patient: PatientInput) -> AnalysisResult:
        """
        Run one analysis round trip.

        Args:
            patient: Complete intake record (callers enforce required fields).

        Returns:
            Validated result with conditions in descending probability.

        Raises:
            AnalysisFailedError: On any provider or parsing failure.
        """
        prompt = build_prompt(patient)
        started = time.perf_counter()

        try:
            raw = await self._provider.generate_json(prompt, RESPONSE_SCHEMA)
            result = AnalysisResult.model_validate_json(raw.strip())
        except Exception as e:
            ANALYSES_TOTAL.labels(outcome="failure").inc()
            logger.error(
                f"Error calling AI provider: {type(e).__name__}",
                extra={"model": self.model_name},
                exc_info=True
            )
            raise AnalysisFailedError() from e
        finally:
            ANALYSIS_DURATION.observe(time.perf_counter() - started)

        ANALYSES_TOTAL.labels(outcome="success").inc()
        logger.info(
            "Analysis received",
            extra={
                "conditions": len(result.conditions),
                "urgency_level": result.urgency_level.value
            }
        )
        return result.sorted_by_probability()
