"""
Health check routes.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from jobqueue import __version__
from jobqueue.api.deps import JobQueueDep
from jobqueue.types.api import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Report service status and queue backlog.",
)
async def health_check(queue: JobQueueDep) -> HealthResponse:
    """
    Perform a health check.

    Returns:
        HealthResponse with the pending entry count of each priority queue.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        pending=queue.pending_counts(),
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/live",
    summary="Liveness check",
    description="Check if the service is alive.",
)
async def liveness_check() -> dict:
    """Liveness probe endpoint."""
    return {"alive": True}
