"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health/ always returns 200 if the process is up

Design Decisions:
    - No readiness probe: the service has no backing store to check
"""

from fastapi import APIRouter, Depends, status

from navtree.config import Settings, get_settings

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": "1.0.0",
    }
