"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formgate import __version__
from formgate.api import web
from formgate.api.v1 import router as v1_router
from formgate.core.config import settings
from formgate.core.errors import setup_error_handlers
from formgate.core.logging_config import configure_logging
from formgate.core.middleware import MetricsMiddleware, RequestIDMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting Formgate...")
    if not settings.login_configured:
        logger.warning("LOGIN_USERNAME or LOGIN_PASSWORD is empty; every login will fail")
    yield
    logger.info("Shutting down Formgate...")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Formgate",
        description="""
Form login service.

## Endpoints
- **Login**: `GET /login` form page, `POST /login` credential check (HTML)
- **Health**: health, readiness and Prometheus metrics under `/api/v1`

## Error Codes
- `NOT_FOUND`, `METHOD_NOT_ALLOWED`: Routing
- `INTERNAL_ERROR`: Unexpected failure
        """.strip(),
        version=__version__,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.environment == "development" else None,
        redoc_url="/api/redoc" if settings.environment == "development" else None,
        openapi_tags=[
            {"name": "login", "description": "Form login"},
            {"name": "health", "description": "Health checks and metrics"},
        ],
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Metrics middleware (collect metrics for all requests)
    app.add_middleware(MetricsMiddleware)

    # Request ID middleware (added last so it runs first on requests)
    app.add_middleware(RequestIDMiddleware)

    # Error handlers
    setup_error_handlers(app)

    # Routes
    app.include_router(web.router, tags=["login"])
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
