"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import Settings, get_settings
from ..dependencies import get_container

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    session: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(settings: Settings = Depends(get_settings)) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether Supabase is configured and whether the session
    synchronizer has resolved its first session.
    """
    if not settings.supabase_configured:
        return ReadinessResponse(status="degraded", database="unconfigured", session="disabled")
    if not settings.enable_session_sync:
        return ReadinessResponse(status="ready", database="configured", session="disabled")

    state = get_container().synchronizer.state
    return ReadinessResponse(
        status="ready",
        database="configured",
        session="initializing" if state.initializing else "resolved",
    )
