"""API routes for the AI Symptom Checker."""

from fastapi import APIRouter

from symptom_checker.api.v1 import analysis, health, sessions

# Create main API router
api_router = APIRouter()

# Include all v1 routes
api_router.include_router(health.router, tags=["health"])
api_router.include_router(analysis.router, tags=["analysis"])
api_router.include_router(sessions.router, tags=["sessions"])

__all__ = ["api_router"]
