"""SQLAlchemy implementation of NoteRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notedesk.domain.note import Note, NoteRepository
from notedesk.infrastructure.persistence.sqlalchemy.models import NoteModel

logger = logging.getLogger(__name__)


class NoteRepositorySQLAlchemy(NoteRepository):
    """SQLAlchemy implementation of the NoteRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists_for_user(self, user_id: UUID) -> bool:
        stmt = select(NoteModel.id).where(NoteModel.user_id == user_id).limit(1)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, note: Note) -> None:
        existing = await self._session.get(NoteModel, note.id)

        if existing:
            existing.title = note.title
            existing.text = note.text
            existing.completed = note.completed
            existing.updated_at = note.updated_at
            logger.debug("Updated note: %s", note.id)
        else:
            self._session.add(self._map_to_model(note))
            logger.info("Created note: %s (user: %s)", note.id, note.user_id)

        await self._session.flush()

    def _map_to_model(self, note: Note) -> NoteModel:
        return NoteModel(
            id=note.id,
            user_id=note.user_id,
            title=note.title,
            text=note.text,
            completed=note.completed,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )
