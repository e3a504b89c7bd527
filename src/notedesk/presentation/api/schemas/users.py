from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class CreateUserRequest(BaseModel):
    """Request schema for creating a user.

    Fields are untyped. Shape checks happen in the user lifecycle service,
    so malformed bodies get the same 400 messages as missing fields.
    """

    username: Any = None
    password: Any = None
    roles: Any = None


class UpdateUserRequest(BaseModel):
    """Request schema for updating a user. ``password`` is optional."""

    id: Any = None
    username: Any = None
    roles: Any = None
    active: Any = None
    password: Any = None


class DeleteUserRequest(BaseModel):
    """Request schema for deleting a user."""

    id: Any = None


class UserResponse(BaseModel):
    """Response schema for a user in listings (never includes the password)."""

    id: UUID
    username: str
    roles: list[str]
    active: bool

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str
