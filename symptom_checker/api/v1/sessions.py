"""
Flow session endpoints.

Each session is one pass through consent -> form -> loading -> results,
restartable indefinitely. Responses carry the rendered view of the step
the session is on after the action.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from symptom_checker.core.exceptions import (
    IncompleteSubmissionError,
    InvalidTransitionError,
    SessionNotFoundError,
)
from symptom_checker.core.logging import get_logger
from symptom_checker.core.rate_limit import (
    get_analysis_rate_limit,
    get_session_create_rate_limit,
    limiter,
)
from symptom_checker.dependencies import get_analysis_gateway, get_sessions
from symptom_checker.schemas.symptoms import ConsentAgreement, PatientInput
from symptom_checker.schemas.views import SessionResponse
from symptom_checker.services.analysis_gateway import AnalysisGateway
from symptom_checker.services.session_store import SessionStore
from symptom_checker.services.symptom_flow import SymptomCheckerFlow
from symptom_checker.services.views import render

logger = get_logger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _lookup(sessions: SessionStore, session_id: str) -> SymptomCheckerFlow:
    try:
        return sessions.get(session_id)
    except SessionNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found"
        )


def _conflict(e: InvalidTransitionError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


def _respond(session_id: str, flow: SymptomCheckerFlow) -> SessionResponse:
    return SessionResponse(session_id=session_id, view=render(flow.state))


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(get_session_create_rate_limit)
async def create_session(
    request: Request,
    sessions: SessionStore = Depends(get_sessions),
    gateway: AnalysisGateway = Depends(get_analysis_gateway)
) -> SessionResponse:
    """Start a new session on the consent step."""
    session_id, flow = sessions.create(gateway)
    return _respond(session_id, flow)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    sessions: SessionStore = Depends(get_sessions)
) -> SessionResponse:
    """Current view of the session."""
    return _respond(session_id, _lookup(sessions, session_id))


@router.post("/{session_id}/consent", response_model=SessionResponse)
async def give_consent(
    session_id: str,
    agreement: ConsentAgreement,
    sessions: SessionStore = Depends(get_sessions)
) -> SessionResponse:
    """Accept the agreements and move to the intake form."""
    flow = _lookup(sessions, session_id)

    if not agreement.all_consented:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="All agreements must be accepted to continue"
        )

    try:
        flow.consent()
    except InvalidTransitionError as e:
        raise _conflict(e)

    return _respond(session_id, flow)


@router.post("/{session_id}/analyze", response_model=SessionResponse)
@limiter.limit(get_analysis_rate_limit)
async def analyze(
    request: Request,
    session_id: str,
    patient: PatientInput,
    sessions: SessionStore = Depends(get_sessions)
) -> SessionResponse:
    """
    Submit the intake form.

    Waits for the AI provider. On success the view is the results report;
    on failure it is the form again with an error and the submitted input.
    """
    flow = _lookup(sessions, session_id)

    try:
        await flow.analyze(patient)
    except IncompleteSubmissionError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Required fields are empty", "missing_fields": e.missing_fields}
        )
    except InvalidTransitionError as e:
        raise _conflict(e)

    logger.info("Session analysis finished", extra={"session_id": session_id, "step": flow.step})
    return _respond(session_id, flow)


@router.post("/{session_id}/new-analysis", response_model=SessionResponse)
async def new_analysis(
    session_id: str,
    sessions: SessionStore = Depends(get_sessions)
) -> SessionResponse:
    """Discard the current report and return to an empty form."""
    flow = _lookup(sessions, session_id)

    try:
        flow.new_analysis()
    except InvalidTransitionError as e:
        raise _conflict(e)

    return _respond(session_id, flow)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: str,
    sessions: SessionStore = Depends(get_sessions)
) -> None:
    """Discard the session."""
    try:
        sessions.delete(session_id)
    except SessionNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found"
        )
