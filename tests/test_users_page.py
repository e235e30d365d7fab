"""Tests for the landing page."""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.mock import MockAuth
from src.db.crud import get_user_by_identity
from tests.conftest import read_session


class TestNewUserPage:
    """Tests for / and /users/new."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/", "/users/new"])
    async def test_anonymous_sees_login_link(self, client: AsyncClient, path: str):
        response = await client.get(path)

        assert response.status_code == 200
        assert "Sign in with GitHub" in response.text
        assert "/auth/github" in response.text

    @pytest.mark.asyncio
    async def test_signed_in_user_is_greeted(self, client: AsyncClient, github_mock: MockAuth):
        await client.get("/auth/github/callback")

        response = await client.get("/")

        assert "Welcome, Jose!" in response.text
        assert "/logout" in response.text
        assert "Sign in with GitHub" not in response.text

    @pytest.mark.asyncio
    async def test_signed_out_after_logout(self, client: AsyncClient, github_mock: MockAuth):
        await client.get("/auth/github/callback")
        await client.get("/logout")

        response = await client.get("/")

        assert "Sign in with GitHub" in response.text

    @pytest.mark.asyncio
    async def test_stale_session_is_cleared(
        self, client: AsyncClient, db_session: AsyncSession, github_mock: MockAuth
    ):
        await client.get("/auth/github/callback")
        user = await get_user_by_identity(db_session, "github", "5073754")
        await db_session.delete(user)
        await db_session.commit()

        response = await client.get("/")

        assert "Sign in with GitHub" in response.text
        assert read_session(client).get("user_id") is None

    @pytest.mark.asyncio
    async def test_security_headers(self, client: AsyncClient):
        response = await client.get("/")

        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["X-Content-Type-Options"] == "nosniff"
