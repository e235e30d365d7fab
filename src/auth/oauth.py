"""GitHub OAuth configuration using Authlib."""

import httpx
from authlib.integrations.starlette_client import OAuth, OAuthError, StarletteOAuth2App
from fastapi import HTTPException, Request
from pydantic import ValidationError
from starlette.config import Config
from starlette.responses import RedirectResponse

from src.auth.exceptions import AuthFailure
from src.auth.mock import mock_auth
from src.auth.models import AuthHash, github_auth_hash
from src.config import get_settings
from src.constants import (
    FAILURE_INVALID_CREDENTIALS,
    FAILURE_INVALID_USER,
    GITHUB_API_BASE_URL,
    GITHUB_AUTHORIZE_URL,
    GITHUB_SCOPE,
    GITHUB_TOKEN_URL,
    HTTPX_TIMEOUT,
)
from src.utils.logging import get_logger

settings = get_settings()
logger = get_logger(__name__)

# Authlib needs a Starlette Config object for session handling
starlette_config = Config(environ={
    "GITHUB_CLIENT_ID": settings.github_client_id,
    "GITHUB_CLIENT_SECRET": settings.github_client_secret,
})

oauth = OAuth(starlette_config)

oauth.register(
    name="github",
    access_token_url=GITHUB_TOKEN_URL,
    access_token_params=None,
    authorize_url=GITHUB_AUTHORIZE_URL,
    authorize_params=None,
    api_base_url=GITHUB_API_BASE_URL,
    client_kwargs={"scope": GITHUB_SCOPE, "timeout": HTTPX_TIMEOUT},
)


def callback_url(provider: str) -> str:
    return f"{settings.app_url}/auth/{provider}/callback"


def _get_client(provider: str) -> StarletteOAuth2App:
    client = oauth.create_client(provider)
    if client is None:
        raise HTTPException(status_code=404, detail=f"Unknown auth provider: {provider}")
    return client


async def authorize_redirect(request: Request, provider: str) -> RedirectResponse:
    """Start the request phase: send the browser to the provider."""
    client = _get_client(provider)
    if mock_auth.test_mode:
        return RedirectResponse(url=f"/auth/{provider}/callback", status_code=302)
    return await client.authorize_redirect(request, callback_url(provider))


async def _fetch_github(client: StarletteOAuth2App, request: Request) -> AuthHash:
    token = await client.authorize_access_token(request)

    resp = await client.get("user", token=token)
    resp.raise_for_status()
    profile = resp.json()

    emails = None
    if not profile.get("email"):
        resp = await client.get("user/emails", token=token)
        if resp.status_code == 200:
            emails = resp.json()
        else:
            logger.debug(f"Could not list GitHub emails: HTTP {resp.status_code}")

    return github_auth_hash(token, profile, emails)


async def fetch_auth_hash(request: Request, provider: str) -> AuthHash:
    """Complete the callback phase and return the normalized auth hash.

    Raises:
        HTTPException: 404 for an unknown provider.
        AuthFailure: if the provider reported an error, state did not match,
            or the payload lacks a usable identity.
    """
    client = _get_client(provider)
    try:
        if mock_auth.test_mode:
            return mock_auth.fetch(provider)
        return await _fetch_github(client, request)
    except OAuthError as e:
        logger.warning(f"OAuth callback failed for {provider}: {e.error} {e.description or ''}")
        raise AuthFailure(provider, e.error or FAILURE_INVALID_CREDENTIALS) from e
    except httpx.HTTPError as e:
        logger.warning(f"Fetching {provider} profile failed: {e}")
        raise AuthFailure(provider, FAILURE_INVALID_CREDENTIALS) from e
    except (ValidationError, KeyError) as e:
        logger.warning(f"Malformed {provider} auth payload: {e}")
        raise AuthFailure(provider, FAILURE_INVALID_USER) from e
