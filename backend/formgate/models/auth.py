"""Authentication models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Credential pair submitted with one login attempt.

    Either field may be absent (``None``) or empty.
    """

    username: Optional[str] = Field(None, description="Username")
    password: Optional[str] = Field(None, description="Password", repr=False)


class LoginOutcome(str, Enum):
    """Result of checking a credential pair."""

    SUCCESS = "success"
    FAILED = "failed"

    @property
    def message(self) -> str:
        """User-visible marker text for this outcome."""
        if self is LoginOutcome.SUCCESS:
            return "Login Successful"
        return "Login Failed"
