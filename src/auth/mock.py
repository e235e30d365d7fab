"""Mock auth registry used in place of the real OAuth handshake in test mode."""

from typing import Any

from src.auth.exceptions import AuthFailure
from src.auth.models import AuthHash
from src.config import get_settings

DEFAULT_MOCK: dict[str, Any] = {
    "provider": "default",
    "uid": "1234",
    "info": {"name": "Example User"},
}


class MockAuth:
    """Registry of canned auth payloads keyed by provider.

    A payload may be a dict (parsed into an AuthHash) or a string, which
    is treated as a failure code for that provider.
    """

    def __init__(self, test_mode: bool = False) -> None:
        self.test_mode = test_mode
        self._mocks: dict[str, dict[str, Any] | str] = {}

    def add_mock(self, provider: str, payload: dict[str, Any] | str) -> None:
        if isinstance(payload, dict):
            payload = {"provider": provider, **payload}
        self._mocks[provider] = payload

    def reset(self) -> None:
        self._mocks.clear()

    def fetch(self, provider: str) -> AuthHash:
        """Return the mock for ``provider``, or the default mock.

        Raises:
            AuthFailure: if the registered mock is a failure code.
        """
        payload = self._mocks.get(provider)
        if payload is None:
            payload = {**DEFAULT_MOCK, "provider": provider}
        if isinstance(payload, str):
            raise AuthFailure(provider, payload)
        return AuthHash.model_validate(payload)


mock_auth = MockAuth(test_mode=get_settings().oauth_test_mode)
