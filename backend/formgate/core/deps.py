"""Shared FastAPI dependency functions."""

from formgate.services.login import LoginService, login_service


def get_login_service() -> LoginService:
    """Return the :class:`LoginService` holding the configured credential pair."""
    return login_service
