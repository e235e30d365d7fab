"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.models import AuthHash
from src.auth.oauth import fetch_auth_hash
from src.constants import SESSION_USER_KEY
from src.db import get_db
from src.db.crud import get_user
from src.models.user import User


async def get_optional_user(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User | None:
    """Get current user from session if logged in."""
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        return None

    user = await get_user(db, user_id)

    # If user_id in session but user doesn't exist in DB, clear stale session
    if not user:
        request.session.pop(SESSION_USER_KEY, None)

    return user


async def get_auth_hash(request: Request, provider: str) -> AuthHash:
    """Complete the OAuth callback for ``provider`` and return its auth hash."""
    return await fetch_auth_hash(request, provider)
