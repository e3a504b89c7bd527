"""Note domain.

Only the parts of the note model the rest of the system depends on:
the aggregate (with its reference to the owning user) and the
repository used to ask whether a user still has notes.
"""

from notedesk.domain.note.aggregates import Note
from notedesk.domain.note.repositories import NoteRepository

__all__ = [
    "Note",
    "NoteRepository",
]
