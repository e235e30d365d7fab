"""CRUD operations module."""

from src.db.crud.user import (
    count_users,
    create_user,
    find_or_create_user,
    get_user,
    get_user_by_identity,
)

__all__ = [
    "count_users",
    "create_user",
    "find_or_create_user",
    "get_user",
    "get_user_by_identity",
]
