"""SQLAlchemy model for Note aggregate."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from notedesk.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class NoteModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting notes.

    ``user_id`` references ``users.id`` (defined by notedesk_identity on the
    same metadata). No cascade: users with notes are never deleted.
    """

    __tablename__ = "notes"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<NoteModel(id={self.id}, user_id={self.user_id}, title={self.title})>"
