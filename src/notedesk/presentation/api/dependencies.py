"""FastAPI dependency injection for the notedesk API.

Provides dependencies for:
- Settings bound to the running application
- Database sessions
- Service instances

The engine and session maker are created by the application lifespan and
kept on ``app.state``; nothing here holds a module-level connection.
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from notedesk.infrastructure.persistence.sqlalchemy.repositories import (
    NoteRepositorySQLAlchemy,
)
from notedesk_config.settings import Settings
from notedesk_identity import PasswordHashingService, UserLifecycleService
from notedesk_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


def get_api_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the application's
    session maker. Uncommitted work is rolled back when the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    """Get password hashing service with the configured work factor."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_user_lifecycle_service(
    session: DBSession,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> UserLifecycleService:
    """Get the user lifecycle service bound to the request session."""
    return UserLifecycleService(
        user_repository=UserRepositorySQLAlchemy(session),
        note_repository=NoteRepositorySQLAlchemy(session),
        password_service=password_service,
    )


# Type alias for injected user service
UserService = Annotated[UserLifecycleService, Depends(get_user_lifecycle_service)]
