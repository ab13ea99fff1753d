"""
Health check and monitoring router.

Provides endpoints for liveness, readiness, and Prometheus metrics.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..config import settings
from ..dependencies import get_compensation_service
from ..metrics import metrics_endpoint
from ..models import HealthResponse, ReadinessResponse
from ..services.compensation_service import CompensationService

router = APIRouter(tags=["Health"])

SERVICE_VERSION = "1.0.0"


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check():
    """
    Basic health check.

    Always returns 200 OK if the service is running.
    """
    return HealthResponse(
        status="healthy",
        service=settings.SERVICE_NAME,
        version=SERVICE_VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Storage unreachable", "model": ReadinessResponse}},
    summary="Readiness check",
)
async def readiness_check(service: CompensationService = Depends(get_compensation_service)):
    """
    Readiness check.

    Returns 200 if the employee store answers, 503 otherwise.
    """
    storage_ok = await service.repository.ping()
    response = ReadinessResponse(
        ready=storage_ok,
        checks={"storage": "healthy" if storage_ok else "unavailable"},
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
    if not storage_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=response.model_dump()
        )
    return response


@router.get("/metrics", include_in_schema=False)
async def metrics():
    """Prometheus metrics endpoint."""
    return await metrics_endpoint()
