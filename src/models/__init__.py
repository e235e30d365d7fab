"""SQLAlchemy models."""

from src.models.base import Base
from src.models.user import User

__all__ = [
    "Base",
    "User",
]
