"""API v1 routes."""

from fastapi import APIRouter

from formgate.api.v1 import health

router = APIRouter()

# Health checks and metrics (no auth)
router.include_router(health.router, tags=["health"])
