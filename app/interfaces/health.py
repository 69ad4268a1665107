"""
Health check router.

Provides a simple liveness endpoint. No authentication, no database
round-trip. Returns application status and version.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.accounts.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="OK", version=settings.version)
