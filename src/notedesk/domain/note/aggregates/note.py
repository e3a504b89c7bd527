"""Note aggregate.

Notes are owned by the notes feature; the user lifecycle only cares that a
note references its user through ``user_id``.
"""

from datetime import datetime
from uuid import UUID, uuid4

from notedesk.domain.shared.time import utc_now


class Note:
    """A note assigned to a user."""

    def __init__(
        self,
        user_id: UUID,
        title: str,
        text: str,
        completed: bool = False,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._title = title
        self._text = text
        self._completed = completed
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def text(self) -> str:
        return self._text

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def create(cls, user_id: UUID, title: str, text: str) -> "Note":
        return cls(user_id=user_id, title=title, text=text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Note(id={self._id}, user_id={self._user_id}, title={self._title!r})"
