"""Integration tests for the form login flow."""

import asyncio

import pytest
import httpx


class TestLoginFlow:
    """Integration tests for the login page and login endpoint."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,password,marker",
        [
            ("admin", "password123", "Login Successful"),
            ("admin", "wrongpassword", "Login Failed"),
            ("", "", "Login Failed"),
            (None, None, "Login Failed"),
        ],
    )
    async def test_login_scenarios(
        self, async_client: httpx.AsyncClient, login_form, username, password, marker
    ):
        """Each scenario answers 200 with the matching marker."""
        response = await async_client.post(
            "/login", data=login_form(username, password)
        )

        assert response.status_code == 200
        assert marker in response.text
        assert "charset=utf-8" in response.headers["content-type"]

    @pytest.mark.asyncio
    async def test_form_page_then_submit(
        self, async_client: httpx.AsyncClient, expected_credentials
    ):
        """The form page posts to the endpoint that checks credentials."""
        page = await async_client.get("/login")
        assert page.status_code == 200
        assert 'action="/login"' in page.text

        response = await async_client.post("/login", data=expected_credentials)
        assert response.status_code == 200
        assert "Login Successful" in response.text

    @pytest.mark.asyncio
    async def test_login_is_stateless(
        self, async_client: httpx.AsyncClient, expected_credentials
    ):
        """A success does not carry over to the next request and sets no cookie."""
        first = await async_client.post("/login", data=expected_credentials)
        second = await async_client.post("/login", data={})

        assert "Login Successful" in first.text
        assert "set-cookie" not in first.headers
        assert "Login Failed" in second.text

    @pytest.mark.asyncio
    async def test_concurrent_logins_are_isolated(
        self, async_client: httpx.AsyncClient, expected_credentials
    ):
        """Interleaved good and bad attempts each get their own outcome."""
        bad = {"username": "admin", "password": "wrongpassword"}
        payloads = [expected_credentials if i % 2 == 0 else bad for i in range(20)]

        responses = await asyncio.gather(
            *(async_client.post("/login", data=p) for p in payloads)
        )

        for i, response in enumerate(responses):
            assert response.status_code == 200
            expected = "Login Successful" if i % 2 == 0 else "Login Failed"
            assert expected in response.text

    @pytest.mark.asyncio
    async def test_login_has_request_id(
        self, async_client: httpx.AsyncClient, expected_credentials
    ):
        """Login responses carry a request ID header."""
        response = await async_client.post("/login", data=expected_credentials)
        assert response.headers.get("X-Request-ID")
