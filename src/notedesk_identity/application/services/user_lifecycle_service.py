"""User lifecycle service: list, create, update and delete users."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from notedesk_identity.application.dtos import (
    CreateUserInput,
    DeleteUserInput,
    UpdateUserInput,
    UserOperationResult,
)
from notedesk_identity.domain.user import (
    DuplicateUsernameError,
    InvalidUserDataError,
    NoUsersFoundError,
    User,
    UserHasNotesError,
    UserNotFoundError,
    UserSummary,
)

if TYPE_CHECKING:
    from notedesk.domain.note import NoteRepository
    from notedesk_identity.domain.user import UserRepository
    from notedesk_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)


class UserLifecycleService:
    """
    Application service for user administration.

    Each operation parses its input, then runs a short fixed sequence of
    store calls. The service holds no state between calls; the repositories
    it receives are bound to the caller's session.

    Duplicate checks and the notes guard are plain reads followed by a
    write, without a lock. Two concurrent requests can both pass the check.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        note_repository: NoteRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._note_repo = note_repository
        self._password_service = password_service

    async def list_users(self) -> list[UserSummary]:
        users = await self._user_repo.list_all()
        if not users:
            raise NoUsersFoundError
        return users

    async def create_user(
        self,
        username: Any,
        password: Any,
        roles: Any = None,
    ) -> UserOperationResult:
        data = CreateUserInput.parse(username=username, password=password, roles=roles)

        duplicate = await self._user_repo.find_by_username(data.username)
        if duplicate is not None:
            raise DuplicateUsernameError(data.username)

        password_hash = await self._hash(data.password)
        user = User.create(data.username, password_hash, roles=data.roles)

        created = await self._user_repo.insert(user)
        if created is None:
            raise InvalidUserDataError

        logger.info("User created: %s (roles: %s)", created.username, created.roles)
        return UserOperationResult(
            message=f"New user {created.username} created",
            user_id=created.id,
            username=created.username,
        )

    async def update_user(
        self,
        id: Any,
        username: Any,
        roles: Any,
        active: Any,
        password: Any = None,
    ) -> UserOperationResult:
        data = UpdateUserInput.parse(
            id=id,
            username=username,
            roles=roles,
            active=active,
            password=password,
        )

        user = await self._find_user(data.user_id, data.id)

        # A match on the user being updated is its own username, not a duplicate
        duplicate = await self._user_repo.find_by_username(data.username)
        if duplicate is not None and duplicate.id != user.id:
            raise DuplicateUsernameError(data.username, message="Duplicate user")

        user.update_profile(username=data.username, roles=data.roles, active=data.active)

        if data.password:
            user.change_password_hash(await self._hash(data.password))

        updated = await self._user_repo.save(user)

        logger.info("User updated: %s (%s)", updated.username, updated.id)
        return UserOperationResult(
            message=f"{updated.username} updated",
            user_id=updated.id,
            username=updated.username,
        )

    async def delete_user(self, id: Any) -> UserOperationResult:
        data = DeleteUserInput.parse(id=id)
        user_id = data.user_id

        # Notes are checked before the user is looked up, so an id with notes
        # reports the notes even if the user row is gone.
        if user_id is not None and await self._note_repo.exists_for_user(user_id):
            raise UserHasNotesError(data.id)

        user = await self._find_user(user_id, data.id)
        await self._user_repo.delete(user)

        logger.info("User deleted: %s (%s)", user.username, data.id)
        return UserOperationResult(
            message=f"Username '{user.username}' with ID '{data.id}' deleted",
            user_id=user.id,
            username=user.username,
        )

    async def _find_user(self, user_id, raw_id: str) -> User:
        user = await self._user_repo.find_by_id(user_id) if user_id else None
        if user is None:
            raise UserNotFoundError(raw_id)
        return user

    async def _hash(self, password: str) -> str:
        # bcrypt is CPU bound; keep it off the event loop thread
        return await asyncio.to_thread(self._password_service.hash, password)
