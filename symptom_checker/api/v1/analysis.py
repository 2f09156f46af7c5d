"""
Stateless analysis endpoints.

One request in, one report out; no session involved.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status

from symptom_checker.core.exceptions import AnalysisFailedError
from symptom_checker.core.logging import get_logger
from symptom_checker.core.rate_limit import get_analysis_rate_limit, limiter
from symptom_checker.dependencies import get_analysis_gateway
from symptom_checker.schemas.symptoms import AnalysisResult, PatientInput
from symptom_checker.services.analysis_gateway import RESPONSE_SCHEMA, AnalysisGateway

logger = get_logger(__name__)

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.get("/schema", summary="Provider Response Schema")
async def response_schema() -> dict[str, Any]:
    """Schema the AI provider is constrained to."""
    return RESPONSE_SCHEMA


@router.post(
    "",
    response_model=AnalysisResult,
    summary="Analyze Symptoms",
    description="""
    Send a complete intake record to the AI provider and return its
    structured analysis, with conditions ordered by probability.

    Requires age, gender, severity, description and duration; history is optional.
    """
)
@limiter.limit(get_analysis_rate_limit)
async def analyze_symptoms(
    request: Request,
    patient: PatientInput,
    gateway: AnalysisGateway = Depends(get_analysis_gateway)
) -> AnalysisResult:
    """
    Analyze one intake record.

    Returns:
        The AI analysis.
    """
    missing = patient.missing_fields()
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Required fields are empty", "missing_fields": missing}
        )

    logger.info("Stateless symptom analysis requested")

    try:
        result = await gateway.analyze(patient)
    except AnalysisFailedError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e)
        )

    logger.info(
        "Symptom analysis complete",
        extra={
            "conditions_found": len(result.conditions),
            "urgency_level": result.urgency_level.value
        }
    )
    return result
