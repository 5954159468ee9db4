"""Health check endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Response
from pydantic import BaseModel

from formgate import __version__
from formgate.core.config import settings
from formgate.core.metrics import metrics

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str = __version__


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    timestamp: str
    login: dict
    version: str = __version__


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the service is running.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether an expected credential pair is configured. The service
    answers login attempts either way; without a configured pair every
    attempt fails.
    """
    configured = settings.login_configured
    if not configured:
        logger.warning("Login credentials are not configured; all logins will fail")

    return ReadinessResponse(
        status="ready",
        timestamp=datetime.now(timezone.utc).isoformat(),
        login={"configured": configured},
    )


@router.get("/metrics")
async def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Returns metrics in Prometheus text format.
    """
    metrics_data = metrics.get_metrics()
    return Response(
        content=metrics_data,
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
