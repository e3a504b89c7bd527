from notedesk.domain.note.aggregates.note import Note

__all__ = ["Note"]
