"""Session routes: OAuth sign-in, callback and sign-out."""

from typing import Annotated
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth import AuthHash, get_auth_hash
from src.auth.oauth import authorize_redirect
from src.constants import FAILURE_INVALID_USER, GITHUB_PROVIDER, SESSION_USER_KEY
from src.db import get_db
from src.db.crud import find_or_create_user
from src.utils.logging import LogContext, get_logger
from src.web.context import get_base_context, templates

router = APIRouter()
logger = get_logger(__name__)


def failure_redirect(strategy: str, message: str) -> RedirectResponse:
    query = urlencode({"message": message, "strategy": strategy})
    return RedirectResponse(url=f"/auth/failure?{query}", status_code=302)


@router.get("/auth/github", name="github_login")
async def github_login(request: Request) -> RedirectResponse:
    """Initiate GitHub OAuth login."""
    return await authorize_redirect(request, GITHUB_PROVIDER)


@router.get("/auth/failure", name="auth_failure", response_class=HTMLResponse)
async def auth_failure(
    request: Request,
    message: Annotated[str, Query()] = "unknown_error",
    strategy: Annotated[str | None, Query()] = None,
) -> HTMLResponse:
    """Render the sign-in page with the failure reason."""
    context = get_base_context(request)
    context["error"] = message.replace("_", " ")
    context["strategy"] = strategy
    return templates.TemplateResponse(request, "users/new.html", context)


@router.get("/auth/{provider}/callback", name="sessions_create")
async def create_session(
    request: Request,
    provider: str,
    auth: Annotated[AuthHash, Depends(get_auth_hash)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RedirectResponse:
    """Sign in the user described by the auth hash, creating them on first login."""
    log = LogContext(logger, provider=auth.provider, uid=auth.uid)
    try:
        user, created = await find_or_create_user(
            db, auth.provider, auth.uid, auth.info.name
        )
    except ValueError as e:
        log.warning(f"Rejected auth payload: {e}")
        await db.rollback()
        return failure_redirect(provider, FAILURE_INVALID_USER)

    await db.commit()
    request.session[SESSION_USER_KEY] = user.id
    log.info(f"Signed in user {user.id}" + (" (new)" if created else ""))
    return RedirectResponse(url="/", status_code=302)


@router.get("/logout", name="sessions_destroy")
async def destroy_session(request: Request) -> RedirectResponse:
    """Log out the current user."""
    request.session.pop(SESSION_USER_KEY, None)
    return RedirectResponse(url="/", status_code=302)
