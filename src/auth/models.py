"""Authentication-related Pydantic models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class AuthInfo(BaseModel):
    """Display information about the authenticated user."""

    name: str | None = None
    email: str | None = None
    nickname: str | None = None
    image: str | None = None
    urls: dict[str, str | None] = Field(default_factory=dict)


class AuthCredentials(BaseModel):
    token: str | None = None
    expires: bool = False
    expires_at: int | None = None


class AuthHash(BaseModel):
    """Normalized result of a completed OAuth exchange.

    This is what the session controller consumes; it never sees tokens
    or provider-specific response shapes beyond ``extra``.
    """

    provider: str
    uid: str
    info: AuthInfo = Field(default_factory=AuthInfo)
    credentials: AuthCredentials | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @field_validator("uid", mode="before")
    @classmethod
    def coerce_uid(cls, v: Any) -> Any:
        """Providers like GitHub return numeric ids."""
        if isinstance(v, int):
            return str(v)
        return v


def _primary_email(emails: list[dict[str, Any]]) -> str | None:
    """Pick the primary verified address from GET /user/emails."""
    for entry in emails:
        if entry.get("primary") and entry.get("verified"):
            return entry.get("email")
    return None


def github_auth_hash(
    token: dict[str, Any],
    profile: dict[str, Any],
    emails: list[dict[str, Any]] | None = None,
) -> AuthHash:
    """Build an AuthHash from a GitHub token and ``GET /user`` profile."""
    email = profile.get("email") or _primary_email(emails or [])
    extra: dict[str, Any] = {"raw_info": profile}
    if emails is not None:
        extra["all_emails"] = emails

    return AuthHash(
        provider="github",
        uid=profile["id"],
        info=AuthInfo(
            name=profile.get("name"),
            email=email,
            nickname=profile.get("login"),
            image=profile.get("avatar_url"),
            urls={
                "GitHub": profile.get("html_url"),
                "Blog": profile.get("blog"),
            },
        ),
        credentials=AuthCredentials(
            token=token.get("access_token"),
            expires="expires_at" in token,
            expires_at=token.get("expires_at"),
        ),
        extra=extra,
    )
