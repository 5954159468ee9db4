"""Error handling and structured error responses."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from formgate.core.config import settings
from formgate.core.metrics import metrics

logger = logging.getLogger(__name__)


class ErrorCode:
    """Stable error codes for API responses."""

    # Routing
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # Request
    REQUEST_VALIDATION_ERROR = "REQUEST_VALIDATION_ERROR"
    HTTP_ERROR = "HTTP_ERROR"

    # System
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorCategory:
    """Error categories for classification."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class APIError(BaseModel):
    """Structured error response model."""

    code: str
    category: str
    message: str
    details: Optional[Dict[str, Any]] = None
    request_id: str
    timestamp: str
    retryable: bool = False


class APIException(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        code: str,
        message: str,
        category: str = ErrorCategory.INTERNAL,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        retryable: bool = False,
    ):
        self.code = code
        self.message = message
        self.category = category
        self.status_code = status_code
        self.details = details or {}
        self.retryable = retryable
        super().__init__(message)


_HTTP_STATUS_CODES = {
    status.HTTP_404_NOT_FOUND: (ErrorCode.NOT_FOUND, ErrorCategory.NOT_FOUND),
    status.HTTP_405_METHOD_NOT_ALLOWED: (
        ErrorCode.METHOD_NOT_ALLOWED,
        ErrorCategory.VALIDATION,
    ),
}


def create_error_response(
    request: Request,
    code: str,
    message: str,
    category: str,
    status_code: int,
    details: Optional[Dict[str, Any]] = None,
    retryable: bool = False,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Create a structured error response."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    error = APIError(
        code=code,
        category=category,
        message=message,
        details=details,
        request_id=request_id,
        timestamp=datetime.now(timezone.utc).isoformat(),
        retryable=retryable,
    )

    logger.error(
        f"API Error: {code} - {message}",
        extra={
            "error_code": code,
            "error_category": category,
            "request_id": request_id,
            "status_code": status_code,
            "details": details,
        },
    )

    metrics.record_error(code, category)

    return JSONResponse(
        status_code=status_code,
        content={"error": error.model_dump()},
        headers=headers,
    )


async def error_handler(request: Request, exc: APIException) -> JSONResponse:
    """Handle APIException instances."""
    return create_error_response(
        request=request,
        code=exc.code,
        message=exc.message,
        category=exc.category,
        status_code=exc.status_code,
        details=exc.details,
        retryable=exc.retryable,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap routing errors (unknown path, wrong method) in the error envelope."""
    code, category = _HTTP_STATUS_CODES.get(
        exc.status_code, (ErrorCode.HTTP_ERROR, ErrorCategory.VALIDATION)
    )
    return create_error_response(
        request=request,
        code=code,
        message=str(exc.detail),
        category=category,
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors raised by FastAPI."""
    return create_error_response(
        request=request,
        code=ErrorCode.REQUEST_VALIDATION_ERROR,
        message="Request validation failed",
        category=ErrorCategory.VALIDATION,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        details={
            "errors": [
                {"loc": list(err.get("loc", [])), "msg": err.get("msg", "")}
                for err in exc.errors()
            ]
        },
    )


async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unhandled exception", exc_info=exc)
    message = "An internal error occurred"
    details: Optional[Dict[str, Any]] = None
    if settings.environment == "development":
        message = str(exc) or message
        details = {"exception_type": type(exc).__name__, "detail": str(exc)}
    return create_error_response(
        request=request,
        code=ErrorCode.INTERNAL_ERROR,
        message=message,
        category=ErrorCategory.INTERNAL,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        retryable=False,
        details=details,
    )


def setup_error_handlers(app: FastAPI) -> None:
    """Register error handlers with FastAPI app."""
    app.add_exception_handler(APIException, error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
