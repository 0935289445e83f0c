"""
Health check API endpoints.

Routes: GET /health, GET /health/storage

Dependencies: certportal.configs
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from certportal.api.deps import get_settings_dependency
from certportal.configs import Settings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/storage", response_model=HealthResponse)
async def health_check_storage(
    settings: Settings = Depends(get_settings_dependency),
) -> HealthResponse:
    """Storage configuration check. Does not call the store."""
    if settings.storage.is_configured:
        return HealthResponse(status="healthy", message="Storage credentials configured")
    return HealthResponse(status="degraded", message="Storage credentials missing")
