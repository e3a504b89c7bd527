from notedesk.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from notedesk.infrastructure.persistence.sqlalchemy.models.note_model import NoteModel

__all__ = [
    "Base",
    "NoteModel",
    "TimestampMixin",
]
