"""
Health check and monitoring endpoints.
"""

import time
from datetime import datetime

from fastapi import APIRouter, Depends
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from symptom_checker.config import get_settings
from symptom_checker.dependencies import get_sessions
from symptom_checker.schemas.common import HealthResponse
from symptom_checker.services.session_store import SessionStore

router = APIRouter()

# Track startup time
_startup_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(sessions: SessionStore = Depends(get_sessions)):
    """Report service status. Does not call the AI provider."""
    settings = get_settings()

    return HealthResponse(
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        status="healthy",
        timestamp=datetime.utcnow(),
        provider_model=settings.GEMINI_MODEL,
        active_sessions=len(sessions),
        uptime_seconds=time.time() - _startup_time
    )


@router.get("/metrics")
async def prometheus_metrics():
    """Expose Prometheus metrics."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )
