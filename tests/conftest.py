"""Pytest configuration and fixtures."""

import os

# Settings are read at import time, so the environment must be ready first.
os.environ["APP_ENV"] = "test"
os.environ["APP_SECRET_KEY"] = "test-secret-key-0123456789abcdefghijklmnop"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["GITHUB_CLIENT_ID"] = "test-client-id"
os.environ["GITHUB_CLIENT_SECRET"] = "test-client-secret"
os.environ["OAUTH_TEST_MODE"] = "false"

import json  # noqa: E402
from base64 import b64decode  # noqa: E402
from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from itsdangerous import TimestampSigner  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.auth.mock import MockAuth, mock_auth  # noqa: E402
from src.config import get_settings  # noqa: E402
from src.constants import SESSION_COOKIE_NAME  # noqa: E402
from src.db.database import get_db  # noqa: E402
from src.main import app  # noqa: E402
from src.models.base import Base  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

GITHUB_AUTH = {
    "provider": "github",
    "uid": "5073754",
    "info": {
        "name": "Jose",
        "email": "jose@joseworks.org",
        "nickname": "JoseWorks",
    },
    "extra": {
        "raw_info": {
            "location": "Eastern Shores",
            "gravatar_id": "123456789",
        },
    },
}


def read_session(client: AsyncClient) -> dict[str, Any]:
    """Decode the signed session cookie held by the test client."""
    cookie = client.cookies.get(SESSION_COOKIE_NAME)
    if not cookie:
        return {}
    signer = TimestampSigner(get_settings().app_secret_key)
    return json.loads(b64decode(signer.unsign(cookie.encode("utf-8"))))


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session on a fresh in-memory database."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_maker() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client sharing the test database session."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def github_mock() -> Generator[MockAuth, None, None]:
    """Enable test mode with the canned GitHub payload."""
    mock_auth.test_mode = True
    mock_auth.add_mock("github", GITHUB_AUTH)
    yield mock_auth
    mock_auth.reset()
    mock_auth.test_mode = False
