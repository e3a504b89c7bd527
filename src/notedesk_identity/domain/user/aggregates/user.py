"""User aggregate for identity concerns only."""

from datetime import datetime
from typing import Iterable
from uuid import UUID, uuid4

from notedesk.domain.shared.time import utc_now
from notedesk_identity.domain.user.value_objects import DEFAULT_ROLES, username_key


class User:
    """
    User aggregate root.

    Holds the credential hash, never the plaintext password. Notes reference
    users by id only.
    """

    def __init__(
        self,
        username: str,
        password_hash: str,
        roles: Iterable[str] | None = None,
        active: bool = True,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._username = username
        self._password_hash = password_hash
        self._roles = list(roles) if roles else list(DEFAULT_ROLES)
        self._active = active
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def username_key(self) -> str:
        return username_key(self._username)

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def roles(self) -> list[str]:
        return list(self._roles)

    @property
    def active(self) -> bool:
        return self._active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(self, username: str, roles: Iterable[str], active: bool) -> None:
        self._username = username
        self._roles = list(roles)
        self._active = active
        self._updated_at = utc_now()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        username: str,
        password_hash: str,
        roles: Iterable[str] | None = None,
    ) -> "User":
        return cls(username=username, password_hash=password_hash, roles=roles)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        username: str,
        password_hash: str,
        roles: Iterable[str],
        active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            username=username,
            password_hash=password_hash,
            roles=roles,
            active=active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username})"
