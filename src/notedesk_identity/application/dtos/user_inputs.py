"""Validated inputs for the user lifecycle operations.

Request bodies arrive as loosely typed JSON. Each operation parses its body
into one of these structs before touching the store; a body that does not
fit raises a ``ValidationError`` subclass instead.
"""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from notedesk_identity.domain.user import InvalidUserDataError, MissingUserFieldsError

ALL_FIELDS_REQUIRED = "All fields are required"
ALL_FIELDS_EXCEPT_PASSWORD_REQUIRED = "All fields except password are required"
USER_ID_REQUIRED = "User ID Required"


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_role_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def _parse_roles(roles: list) -> list[str]:
    if not all(_is_filled(role) for role in roles):
        raise InvalidUserDataError
    return list(roles)


def _parse_user_id(raw: Any) -> UUID | None:
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except ValueError:
        return None


@dataclass(frozen=True)
class CreateUserInput:
    username: str
    password: str
    roles: list[str] | None = None

    @classmethod
    def parse(cls, username: Any, password: Any, roles: Any = None) -> "CreateUserInput":
        if not (_is_filled(username) and _is_filled(password)):
            raise MissingUserFieldsError(ALL_FIELDS_REQUIRED)

        # An empty or non-list roles value falls back to the default roles
        parsed_roles = _parse_roles(roles) if _is_role_list(roles) else None
        return cls(username=username, password=password, roles=parsed_roles)


@dataclass(frozen=True)
class UpdateUserInput:
    """Full replacement of a user's profile; the password is optional."""

    id: str
    username: str
    roles: list[str]
    active: bool
    password: str | None = None

    @classmethod
    def parse(
        cls,
        id: Any,
        username: Any,
        roles: Any,
        active: Any,
        password: Any = None,
    ) -> "UpdateUserInput":
        if not (
            (_is_filled(id) or isinstance(id, UUID))
            and _is_filled(username)
            and _is_role_list(roles)
            and isinstance(active, bool)
        ):
            raise MissingUserFieldsError(ALL_FIELDS_EXCEPT_PASSWORD_REQUIRED)

        if password is not None and not isinstance(password, str):
            raise InvalidUserDataError

        return cls(
            id=str(id),
            username=username,
            roles=_parse_roles(roles),
            active=active,
            password=password or None,
        )

    @property
    def user_id(self) -> UUID | None:
        """The id as a UUID, or None when it cannot name any stored user."""
        return _parse_user_id(self.id)


@dataclass(frozen=True)
class DeleteUserInput:
    id: str

    @classmethod
    def parse(cls, id: Any) -> "DeleteUserInput":
        if not (_is_filled(id) or isinstance(id, UUID)):
            raise MissingUserFieldsError(USER_ID_REQUIRED)
        return cls(id=str(id))

    @property
    def user_id(self) -> UUID | None:
        return _parse_user_id(self.id)
