"""Authentication exceptions."""


class AuthFailure(Exception):
    """The OAuth exchange did not produce a usable auth hash.

    Handled at the application level by redirecting to ``/auth/failure``.
    """

    def __init__(self, strategy: str, message: str) -> None:
        super().__init__(f"{strategy}: {message}")
        self.strategy = strategy
        self.message = message
