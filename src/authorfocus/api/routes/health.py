"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request
from sqlalchemy import text

from authorfocus import __version__
from authorfocus.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its catalog database.",
)
async def health_check(request: Request) -> HealthResponse:
    """Check API health status."""
    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "degraded", "unhealthy"] = "healthy"

    # Check database
    try:
        db_factory = getattr(request.app.state, "db_session_factory", None)
        if db_factory:
            async with db_factory() as session:
                await session.execute(text("SELECT 1"))
            services["database"] = "up"
        else:
            services["database"] = "unknown"
            overall_status = "degraded"
    except Exception:
        services["database"] = "down"
        overall_status = "unhealthy"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        services=services,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    db_factory = getattr(request.app.state, "db_session_factory", None)
    return {"ready": db_factory is not None}
