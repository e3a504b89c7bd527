"""Unit tests for UserLifecycleService."""

import threading
from unittest.mock import AsyncMock, Mock

import pytest

from notedesk_identity import (
    DuplicateUsernameError,
    InvalidUserDataError,
    MissingUserFieldsError,
    NoUsersFoundError,
    PasswordHashingService,
    UserHasNotesError,
    UserLifecycleService,
    UserNotFoundError,
)
from tests.shared.fixtures.factories import TestUserFactory

NEW_HASH = "$2b$10$new-hash"


class _ServiceTestBase:
    def setup_method(self):
        self.user_repo = AsyncMock()
        self.note_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = NEW_HASH

        self.user_repo.find_by_username.return_value = None
        self.user_repo.insert.side_effect = lambda user: user
        self.user_repo.save.side_effect = lambda user: user
        self.note_repo.exists_for_user.return_value = False

        self.service = UserLifecycleService(
            user_repository=self.user_repo,
            note_repository=self.note_repo,
            password_service=self.password_service,
        )


class TestListUsers(_ServiceTestBase):
    @pytest.mark.asyncio
    async def test_returns_summaries(self):
        alice = TestUserFactory.summary(TestUserFactory.alice())
        self.user_repo.list_all.return_value = [alice]

        users = await self.service.list_users()

        assert users == [alice]
        assert not hasattr(users[0], "password_hash")

    @pytest.mark.asyncio
    async def test_empty_store(self):
        self.user_repo.list_all.return_value = []

        with pytest.raises(NoUsersFoundError) as exc_info:
            await self.service.list_users()

        assert exc_info.value.message == "No users found"


class TestCreateUser(_ServiceTestBase):
    @pytest.mark.asyncio
    async def test_success(self):
        result = await self.service.create_user("alice", "pw")

        assert result.message == "New user alice created"
        self.password_service.hash.assert_called_once_with("pw")

        inserted = self.user_repo.insert.call_args[0][0]
        assert inserted.username == "alice"
        assert inserted.password_hash == NEW_HASH
        assert inserted.roles == ["Employee"]
        assert inserted.active is True
        assert result.user_id == inserted.id

    @pytest.mark.asyncio
    async def test_explicit_roles_are_kept(self):
        await self.service.create_user("carol", "pw", ["Manager", "Admin"])

        inserted = self.user_repo.insert.call_args[0][0]
        assert inserted.roles == ["Manager", "Admin"]

    @pytest.mark.asyncio
    async def test_missing_password(self):
        with pytest.raises(MissingUserFieldsError) as exc_info:
            await self.service.create_user("alice", None)

        assert exc_info.value.message == "All fields are required"
        self.user_repo.find_by_username.assert_not_called()
        self.user_repo.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_is_case_insensitive(self):
        self.user_repo.find_by_username.return_value = TestUserFactory.alice()

        with pytest.raises(DuplicateUsernameError) as exc_info:
            await self.service.create_user("ALICE", "pw")

        assert exc_info.value.message == "Duplicate username"
        self.user_repo.find_by_username.assert_called_once_with("ALICE")
        self.password_service.hash.assert_not_called()
        self.user_repo.insert.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_rejects_record(self):
        self.user_repo.insert.side_effect = None
        self.user_repo.insert.return_value = None

        with pytest.raises(InvalidUserDataError) as exc_info:
            await self.service.create_user("alice", "pw")

        assert exc_info.value.message == "Invalid user data received"


class TestUpdateUser(_ServiceTestBase):
    def setup_method(self):
        super().setup_method()
        self.alice = TestUserFactory.alice()
        self.user_repo.find_by_id.return_value = self.alice

    @pytest.mark.asyncio
    async def test_success_without_password_keeps_hash(self):
        old_hash = self.alice.password_hash

        result = await self.service.update_user(
            id=str(self.alice.id),
            username="alicia",
            roles=["Manager"],
            active=False,
        )

        assert result.message == "alicia updated"
        self.user_repo.find_by_id.assert_called_once_with(self.alice.id)
        self.password_service.hash.assert_not_called()

        saved = self.user_repo.save.call_args[0][0]
        assert saved.username == "alicia"
        assert saved.roles == ["Manager"]
        assert saved.active is False
        assert saved.password_hash == old_hash

    @pytest.mark.asyncio
    async def test_password_is_rehashed(self):
        await self.service.update_user(
            id=str(self.alice.id),
            username="alice",
            roles=["Employee"],
            active=True,
            password="new-pw",
        )

        self.password_service.hash.assert_called_once_with("new-pw")
        assert self.user_repo.save.call_args[0][0].password_hash == NEW_HASH

    @pytest.mark.asyncio
    async def test_missing_fields(self):
        with pytest.raises(MissingUserFieldsError) as exc_info:
            await self.service.update_user(
                id=str(self.alice.id),
                username="alice",
                roles=["Employee"],
                active=None,
            )

        assert exc_info.value.message == "All fields except password are required"
        self.user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            await self.service.update_user(
                id=str(TestUserFactory.BOB_ID),
                username="bob",
                roles=["Employee"],
                active=True,
            )

        assert exc_info.value.message == "User not found"
        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self):
        with pytest.raises(UserNotFoundError):
            await self.service.update_user(
                id="not-a-uuid",
                username="alice",
                roles=["Employee"],
                active=True,
            )

        self.user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_username_taken_by_other_user(self):
        self.user_repo.find_by_username.return_value = TestUserFactory.bob()

        with pytest.raises(DuplicateUsernameError) as exc_info:
            await self.service.update_user(
                id=str(self.alice.id),
                username="Bob",
                roles=["Employee"],
                active=True,
            )

        assert exc_info.value.message == "Duplicate user"
        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_own_username_in_other_case_is_allowed(self):
        self.user_repo.find_by_username.return_value = self.alice

        result = await self.service.update_user(
            id=str(self.alice.id),
            username="ALICE",
            roles=["Employee"],
            active=True,
        )

        assert result.message == "ALICE updated"
        self.user_repo.save.assert_called_once()


class TestDeleteUser(_ServiceTestBase):
    def setup_method(self):
        super().setup_method()
        self.alice = TestUserFactory.alice()
        self.user_repo.find_by_id.return_value = self.alice

    @pytest.mark.asyncio
    async def test_success(self):
        user_id = str(self.alice.id)

        result = await self.service.delete_user(user_id)

        assert result.message == f"Username 'alice' with ID '{user_id}' deleted"
        self.note_repo.exists_for_user.assert_called_once_with(self.alice.id)
        self.user_repo.delete.assert_called_once_with(self.alice)

    @pytest.mark.asyncio
    async def test_missing_id(self):
        with pytest.raises(MissingUserFieldsError) as exc_info:
            await self.service.delete_user(None)

        assert exc_info.value.message == "User ID Required"
        self.note_repo.exists_for_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_user_with_notes_is_kept(self):
        self.note_repo.exists_for_user.return_value = True

        with pytest.raises(UserHasNotesError) as exc_info:
            await self.service.delete_user(str(self.alice.id))

        assert exc_info.value.message == "User has assigned notes"
        self.user_repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_notes_are_checked_before_existence(self):
        self.note_repo.exists_for_user.return_value = True
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserHasNotesError):
            await self.service.delete_user(str(TestUserFactory.BOB_ID))

        self.user_repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            await self.service.delete_user(str(TestUserFactory.BOB_ID))

        assert exc_info.value.message == "User not found"
        self.user_repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_malformed_id_is_not_found(self):
        with pytest.raises(UserNotFoundError):
            await self.service.delete_user("not-a-uuid")

        self.note_repo.exists_for_user.assert_not_called()
        self.user_repo.delete.assert_not_called()


class TestPasswordHandling(_ServiceTestBase):
    def setup_method(self):
        super().setup_method()
        self.hasher = PasswordHashingService(rounds=4)
        self.service = UserLifecycleService(
            user_repository=self.user_repo,
            note_repository=self.note_repo,
            password_service=self.hasher,
        )

    @pytest.mark.asyncio
    async def test_update_without_password_keeps_old_credential(self):
        await self.service.create_user("alice", "old-pw")
        alice = self.user_repo.insert.call_args[0][0]
        self.user_repo.find_by_id.return_value = alice

        await self.service.update_user(
            id=str(alice.id), username="alice", roles=["Admin"], active=True
        )

        saved = self.user_repo.save.call_args[0][0]
        assert self.hasher.verify("old-pw", saved.password_hash)

    @pytest.mark.asyncio
    async def test_update_with_password_replaces_credential(self):
        await self.service.create_user("alice", "old-pw")
        alice = self.user_repo.insert.call_args[0][0]
        self.user_repo.find_by_id.return_value = alice

        await self.service.update_user(
            id=str(alice.id),
            username="alice",
            roles=["Employee"],
            active=True,
            password="new-pw",
        )

        saved = self.user_repo.save.call_args[0][0]
        assert self.hasher.verify("new-pw", saved.password_hash)
        assert not self.hasher.verify("old-pw", saved.password_hash)


class _ThreadRecordingHasher(PasswordHashingService):
    def __init__(self):
        super().__init__(rounds=4)
        self.threads: list[int] = []

    def hash(self, password: str) -> str:
        self.threads.append(threading.get_ident())
        return super().hash(password)


class TestHashingStaysOffTheLoop(_ServiceTestBase):
    def setup_method(self):
        super().setup_method()
        self.hasher = _ThreadRecordingHasher()
        self.service = UserLifecycleService(
            user_repository=self.user_repo,
            note_repository=self.note_repo,
            password_service=self.hasher,
        )

    @pytest.mark.asyncio
    async def test_create_hashes_in_worker_thread(self):
        loop_thread = threading.get_ident()

        await self.service.create_user("alice", "pw")

        assert len(self.hasher.threads) == 1
        assert self.hasher.threads[0] != loop_thread

    @pytest.mark.asyncio
    async def test_update_hashes_in_worker_thread(self):
        alice = TestUserFactory.alice()
        self.user_repo.find_by_id.return_value = alice
        loop_thread = threading.get_ident()

        await self.service.update_user(
            id=str(alice.id),
            username="alice",
            roles=["Employee"],
            active=True,
            password="new-pw",
        )

        assert len(self.hasher.threads) == 1
        assert self.hasher.threads[0] != loop_thread
