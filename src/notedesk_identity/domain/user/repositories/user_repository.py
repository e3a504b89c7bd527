"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from notedesk_identity.domain.user.aggregates.user import User
from notedesk_identity.domain.user.value_objects import UserSummary


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def list_all(self) -> list[UserSummary]:
        """List all users without their password hashes."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username, ignoring case."""

    @abstractmethod
    async def insert(self, user: User) -> Optional[User]:
        """Insert a new user. Returns None if the store rejects the record."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Persist changes to an existing user."""

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete a user."""
