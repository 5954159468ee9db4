"""Form login credential check."""

import logging
import secrets
from typing import Optional

from formgate.core.config import settings
from formgate.models.auth import Credentials, LoginOutcome

logger = logging.getLogger(__name__)


def _matches(submitted: Optional[str], expected: str) -> bool:
    """Constant-time comparison; ``None`` and empty values never match."""
    if not submitted or not expected:
        return False
    return secrets.compare_digest(submitted.encode("utf-8"), expected.encode("utf-8"))


class LoginService:
    """Checks submitted credentials against one fixed expected pair."""

    def __init__(self, expected_username: str, expected_password: str):
        self._expected_username = expected_username
        self._expected_password = expected_password

    def authenticate(self, credentials: Credentials) -> LoginOutcome:
        """
        Check a credential pair.

        Args:
            credentials: Submitted username and password, either may be None

        Returns:
            LoginOutcome.SUCCESS for the expected pair, LoginOutcome.FAILED otherwise
        """
        # Both fields are always compared so timing does not reveal which one was wrong.
        username_ok = _matches(credentials.username, self._expected_username)
        password_ok = _matches(credentials.password, self._expected_password)

        if username_ok and password_ok:
            logger.info(f"User '{credentials.username}' authenticated successfully")
            return LoginOutcome.SUCCESS

        if not credentials.username or not credentials.password:
            logger.warning("Authentication failed: missing username or password")
        else:
            logger.warning(
                f"Authentication failed: invalid credentials for user '{credentials.username}'"
            )
        return LoginOutcome.FAILED


login_service = LoginService(settings.login_username, settings.login_password)
