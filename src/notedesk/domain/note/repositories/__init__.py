from notedesk.domain.note.repositories.note_repository import NoteRepository

__all__ = ["NoteRepository"]
