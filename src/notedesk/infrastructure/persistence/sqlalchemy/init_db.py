"""Engine, session factory and schema helpers."""

import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Both model packages must be imported so their tables are on Base.metadata
import notedesk.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import notedesk_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from notedesk.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


def create_engine(database_url: str) -> AsyncEngine:
    """Async engine for ``database_url``.

    A file-backed SQLite database gets its parent directory created.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(url, echo=False, pool_pre_ping=True)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    """Create the tables that do not exist yet; existing data is untouched."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop every table. All data is lost."""
    logger.warning("Dropping tables: %s", ", ".join(sorted(Base.metadata.tables)))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
