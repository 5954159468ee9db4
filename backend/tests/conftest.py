"""Pytest configuration and fixtures."""

import sys

import pytest
import pytest_asyncio
import httpx
from fastapi.testclient import TestClient

# prometheus_client collectors register globally, so metrics is never reloaded.
_KEEP_MODULES = {"formgate", "formgate.core.metrics"}


def _forget_formgate_modules():
    for mod in list(sys.modules):
        if mod.startswith("formgate") and mod not in _KEEP_MODULES:
            del sys.modules[mod]


@pytest.fixture
def app_factory(monkeypatch):
    """
    Build a FastAPI app with settings pinned for testing.
    Modules are re-imported so env overrides reach the settings object.
    """

    def _build(**env):
        base = {
            "ENVIRONMENT": "test",
            "LOGIN_USERNAME": "admin",
            "LOGIN_PASSWORD": "password123",
        }
        base.update(env)
        for key, value in base.items():
            monkeypatch.setenv(key, value)
        _forget_formgate_modules()
        from formgate.main import create_app
        return create_app()

    return _build


@pytest.fixture
def test_app(app_factory):
    """FastAPI app configured with the default test credential pair."""
    return app_factory()


@pytest.fixture
def client(test_app):
    """Test client for FastAPI app."""
    return TestClient(test_app, base_url="http://testserver")


@pytest_asyncio.fixture
async def async_client(test_app):
    """Async client over an in-memory ASGI transport."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(
        transport=transport,
        base_url="http://testserver",
        timeout=15.0,
    ) as ac:
        yield ac
