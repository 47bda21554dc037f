"""
Mock Location API — Health Check Route
========================================

What:  Liveness endpoint for container probes and load balancers.
Why:   The service has no dependencies (no database, no upstream APIs), so
       being able to answer a request is the whole health story.
"""

import time

from fastapi import APIRouter, Request

from mock_locations import __version__
from mock_locations.schemas.location import HealthResponse

router = APIRouter(tags=["Health"])

# Module-level: initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns service status, version, environment and uptime.",
)
async def health_check(request: Request) -> HealthResponse:
    settings = request.app.state.settings
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
