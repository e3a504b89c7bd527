"""Note repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from notedesk.domain.note.aggregates.note import Note


class NoteRepository(ABC):
    """Repository interface for Note aggregates."""

    @abstractmethod
    async def exists_for_user(self, user_id: UUID) -> bool:
        """Check if at least one note is assigned to the given user."""

    @abstractmethod
    async def save(self, note: Note) -> None:
        """Save or update a note."""
