"""Request middleware."""

import logging
import re
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from formgate.core.metrics import metrics

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128
REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add request ID to request state and response headers.

    A well-formed ``X-Request-ID`` sent by the client is reused so the ID can
    be followed across services; anything else is replaced by a fresh UUID.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        incoming = request.headers.get(REQUEST_ID_HEADER, "")
        if (
            incoming
            and len(incoming) <= MAX_REQUEST_ID_LENGTH
            and REQUEST_ID_PATTERN.match(incoming)
        ):
            request_id = incoming
        else:
            request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id

        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Collect HTTP request metrics for Prometheus."""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        # Skip metrics endpoint itself
        if request.url.path == "/api/v1/metrics" or request.url.path == "/metrics":
            return await call_next(request)

        start_time = time.time()
        method = request.method
        endpoint = self._normalize_endpoint(request.url.path)

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            duration = time.time() - start_time
            metrics.record_http_request(method, endpoint, status_code, duration)

        return response

    def _normalize_endpoint(self, path: str) -> str:
        """Strip the API prefix from the path used as the endpoint label."""
        if path.startswith("/api/v1/"):
            path = path[8:]
        elif path.startswith("/api/"):
            path = path[5:]

        return path
