"""Form login endpoints."""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from formgate.core.deps import get_login_service
from formgate.core.metrics import metrics
from formgate.models.auth import Credentials, LoginOutcome
from formgate.services.login import LoginService
from formgate.services.render import render_login_form, render_login_result

logger = logging.getLogger(__name__)

router = APIRouter()

NO_STORE_HEADERS = {"Cache-Control": "no-store"}


def _text_field(value: Any) -> Optional[str]:
    """Form value as text; file parts count as absent."""
    return value if isinstance(value, str) else None


async def _read_credentials(http_request: Request) -> Credentials:
    """Read the credential pair from the request body.

    Bodies that cannot be parsed as a form yield an empty pair.
    """
    try:
        async with http_request.form() as form:
            return Credentials(
                username=_text_field(form.get("username")),
                password=_text_field(form.get("password")),
            )
    except (StarletteHTTPException, MultiPartException) as exc:
        logger.warning(
            f"Unreadable login form: {type(exc).__name__}",
            extra={
                "event": "auth_form_unreadable",
                "request_id": getattr(http_request.state, "request_id", None),
            },
        )
        return Credentials()


@router.get("/login", response_class=HTMLResponse)
async def login_page(http_request: Request) -> HTMLResponse:
    """Serve the login form."""
    action = http_request.url_for("login").path
    return HTMLResponse(
        content=render_login_form(action),
        status_code=status.HTTP_200_OK,
        headers=NO_STORE_HEADERS,
    )


@router.post("/login", response_class=HTMLResponse, name="login")
async def login(
    http_request: Request,
    service: LoginService = Depends(get_login_service),
) -> HTMLResponse:
    """
    Check submitted form credentials.

    Always answers 200; absent, empty and wrong credentials all render
    "Login Failed". The submitted password is never rendered or logged.
    """
    client_ip = http_request.client.host if http_request.client else "unknown"

    credentials = await _read_credentials(http_request)
    username = credentials.username

    outcome = service.authenticate(credentials)
    metrics.record_login_attempt(outcome.value)

    event = "auth_success" if outcome is LoginOutcome.SUCCESS else "auth_failed"
    log = logger.info if outcome is LoginOutcome.SUCCESS else logger.warning
    log(
        f"Login {outcome.value} for username '{username or ''}' from IP {client_ip}",
        extra={
            "event": event,
            "username": username,
            "ip": client_ip,
            "request_id": getattr(http_request.state, "request_id", None),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )

    return HTMLResponse(
        content=render_login_result(outcome),
        status_code=status.HTTP_200_OK,
        headers=NO_STORE_HEADERS,
    )
