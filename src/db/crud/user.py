"""CRUD operations for users."""

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.user import User


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    """Get a user by primary key."""
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_identity(db: AsyncSession, provider: str, uid: str) -> User | None:
    """Get a user by its ``(provider, uid)`` identity."""
    result = await db.execute(
        select(User).where(User.provider == provider, User.uid == uid)
    )
    return result.scalar_one_or_none()


async def count_users(db: AsyncSession) -> int:
    result = await db.execute(select(func.count(User.id)))
    return result.scalar_one()


async def create_user(
    db: AsyncSession,
    provider: str,
    uid: str,
    name: str | None = None,
) -> User:
    """Create and flush a new user.

    Raises:
        ValueError: if provider or uid is blank. Nothing is added to the session.
    """
    user = User(provider=provider, uid=uid, name=name)
    db.add(user)
    await db.flush()
    return user


async def find_or_create_user(
    db: AsyncSession,
    provider: str,
    uid: str,
    name: str | None = None,
) -> tuple[User, bool]:
    """Return the user for ``(provider, uid)``, creating it if absent.

    The stored name is refreshed when the provider reports a different one.
    If a concurrent login inserts the same identity first, the insert is
    rolled back and that row is returned instead.

    Returns:
        Tuple of (user, created).
    """
    user = await get_user_by_identity(db, provider, uid)
    if user:
        if name and user.name != name:
            user.name = name
        return user, False

    try:
        user = await create_user(db, provider, uid, name)
    except IntegrityError:
        await db.rollback()
        user = await get_user_by_identity(db, provider, uid)
        if user is None:
            raise
        return user, False
    return user, True
