"""User model."""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, validates

from src.models.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """A user signed in through an OAuth provider.

    Identified by ``(provider, uid)``; both must be non-blank.
    """

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("provider", "uid", name="uq_users_provider_uid"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    provider: Mapped[str] = mapped_column(String(50), index=True)
    uid: Mapped[str] = mapped_column(String(255))
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    @validates("provider", "uid")
    def validate_presence(self, key: str, value: str | None) -> str:
        if value is None or not str(value).strip():
            raise ValueError(f"{key.capitalize()} can't be blank")
        return str(value)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, provider={self.provider}, uid={self.uid})>"
