"""Authentication module."""

from src.auth.dependencies import get_auth_hash, get_optional_user
from src.auth.exceptions import AuthFailure
from src.auth.mock import mock_auth
from src.auth.models import AuthHash
from src.auth.oauth import oauth

__all__ = [
    "AuthFailure",
    "AuthHash",
    "get_auth_hash",
    "get_optional_user",
    "mock_auth",
    "oauth",
]
