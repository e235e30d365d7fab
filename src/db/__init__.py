"""Database module."""

from src.db.database import engine, get_db, init_db

__all__ = [
    "engine",
    "get_db",
    "init_db",
]
