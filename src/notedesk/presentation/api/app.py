"""notedesk HTTP application.

``create_app()`` builds the FastAPI app; the database engine lives on
``app.state`` for the lifetime of the process. Run with::

    uvicorn notedesk.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from notedesk.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine,
    create_session_maker,
    create_tables,
)
from notedesk.presentation.api.exception_handlers import setup_exception_handlers
from notedesk.presentation.api.middleware import RequestLoggingMiddleware
from notedesk.presentation.api.routers import users_router
from notedesk_config.settings import Settings, get_settings

PROJECT_LOGGERS = ("notedesk", "notedesk_identity")
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "httpx")


@lru_cache(maxsize=1)
def _configure_logging(level_name: str) -> None:
    """Log to stdout as ``time | LEVEL | logger | message``.

    Project loggers follow ``level_name``; chatty libraries stay at WARNING.
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in PROJECT_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

OPENAPI_TAGS = [
    {
        "name": "Users",
        "description": """User administration.

**Rules:**
- Usernames are unique, ignoring case
- Passwords are stored as bcrypt hashes and never returned
- Users with assigned notes cannot be deleted
""",
    },
    {"name": "Health", "description": "Liveness check."},
    {"name": "Info", "description": "Name, version and entry points."},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings

    logger.info("Starting %s API v%s", settings.app_name, API_VERSION)
    engine = create_engine(settings.database_url)
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)
    await _ensure_schema(engine)

    yield

    logger.info("Stopping %s API", settings.app_name)
    await engine.dispose()


async def _ensure_schema(engine: AsyncEngine) -> None:
    """Create missing tables; exit if the database is unreachable."""
    try:
        await create_tables(engine)
    except OSError as e:
        logger.critical("Database unreachable: %s", e)
        raise SystemExit(1) from None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Parameters
    ----------
    settings
        Settings to use instead of ``get_settings()``; tests pass their own.
    """
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Users and notes backend for a small team.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    setup_exception_handlers(app)
    app.include_router(users_router)

    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "healthy", "version": API_VERSION}

    @app.get("/", tags=["Info"])
    async def info() -> dict:
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if docs_enabled else None,
            "endpoints": {"health": "/health", "users": "/users"},
        }

    return app
