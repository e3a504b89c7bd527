"""User store backed by the ``users`` table."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from notedesk_identity.domain.user import (
    User,
    UserRepository,
    UserSummary,
    username_key,
)
from notedesk_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

# Everything but password_hash
_SUMMARY_COLUMNS = (
    UserModel.id,
    UserModel.username,
    UserModel.roles,
    UserModel.active,
    UserModel.created_at,
    UserModel.updated_at,
)


class UserRepositorySQLAlchemy(UserRepository):
    """``UserRepository`` on an ``AsyncSession``. Commits are left to the caller."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[UserSummary]:
        rows = await self._session.execute(
            select(*_SUMMARY_COLUMNS).order_by(UserModel.created_at)
        )
        return [
            UserSummary(
                id=row.id,
                username=row.username,
                roles=list(row.roles),
                active=row.active,
                created_at=row.created_at,
                updated_at=row.updated_at,
            )
            for row in rows
        ]

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._session.get(UserModel, user_id)
        return self._to_domain(model) if model else None

    async def find_by_username(self, username: str) -> User | None:
        model = await self._session.scalar(
            select(UserModel)
            .where(UserModel.username_key == username_key(username))
            .limit(1)
        )
        return self._to_domain(model) if model else None

    async def insert(self, user: User) -> User | None:
        self._session.add(self._to_model(user))
        try:
            await self._session.flush()
        except (IntegrityError, DataError) as e:
            logger.warning("users rejected %r: %s", user.username, e.orig)
            await self._session.rollback()
            return None

        logger.info("Inserted user %s (%s)", user.id, user.username)
        return user

    async def save(self, user: User) -> User:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            self._session.add(self._to_model(user))
            logger.info("Inserted user %s (%s)", user.id, user.username)
        else:
            model.username = user.username
            model.username_key = user.username_key
            model.password_hash = user.password_hash
            model.roles = user.roles
            model.active = user.active
            model.updated_at = user.updated_at
            logger.debug("Saved user %s", user.id)

        await self._session.flush()
        return user

    async def delete(self, user: User) -> None:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            return
        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted user %s (%s)", user.id, user.username)

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            password_hash=model.password_hash,
            roles=model.roles,
            active=model.active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _to_model(user: User) -> UserModel:
        return UserModel(
            id=user.id,
            username=user.username,
            username_key=user.username_key,
            password_hash=user.password_hash,
            roles=user.roles,
            active=user.active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
