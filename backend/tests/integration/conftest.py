"""Integration test configuration and fixtures."""

import pytest


@pytest.fixture
def expected_credentials():
    """Credential pair the test app is configured with (see tests/conftest.py)."""
    return {"username": "admin", "password": "password123"}


@pytest.fixture
def login_form():
    """Build form data, leaving out fields passed as None."""

    def _build(username=None, password=None):
        data = {}
        if username is not None:
            data["username"] = username
        if password is not None:
            data["password"] = password
        return data

    return _build
