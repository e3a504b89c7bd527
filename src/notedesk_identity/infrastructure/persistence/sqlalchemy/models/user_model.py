"""SQLAlchemy model for User aggregate."""

from uuid import UUID

from sqlalchemy import JSON, Boolean, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from notedesk.infrastructure.persistence.sqlalchemy.models.base import TimestampMixin
from notedesk_identity.domain.user import DEFAULT_ROLES
from notedesk_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class UserModel(IdentityBase, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates.

    Usernames have no length limit, so both name columns are unbounded.
    ``username_key`` holds the case-folded username; its unique index backs
    up the case-insensitive duplicate check done by the application.
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    username: Mapped[str] = mapped_column(String, nullable=False)
    username_key: Mapped[str] = mapped_column(
        String,
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    roles: Mapped[list[str]] = mapped_column(
        JSON,
        default=lambda: list(DEFAULT_ROLES),
        nullable=False,
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, username={self.username}, roles={self.roles})>"
