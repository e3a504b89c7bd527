"""notedesk settings.

Values come from, highest priority first:

1. process environment
2. an env file: ``$NOTEDESK_ENV_FILE``, else ``config/.env.dev``, else
   ``config/.env`` (relative to the checkout or the ``/app`` image root)
3. the defaults below

pydantic-settings does the parsing, so ``API_PORT=4000`` arrives as an int.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "NOTEDESK_ENV_FILE"
ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _base_dir() -> Path:
    """Directory holding ``config/``: the checkout root or ``/app``."""
    here = Path(__file__).resolve()
    for candidate in here.parents:
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    return Path("/app")


def get_config_dir() -> Path:
    return _base_dir() / "config"


def _env_file() -> Path | None:
    override = os.environ.get(ENV_FILE_VARIABLE)
    if override:
        explicit = Path(override)
        if not explicit.is_absolute():
            explicit = _base_dir() / explicit
        if explicit.exists():
            return explicit

    for name in ENV_FILE_CANDIDATES:
        candidate = get_config_dir() / name
        if candidate.exists():
            return candidate
    return None


class Settings(BaseSettings):
    """Runtime configuration for the API, the CLI and the database."""

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "notedesk"
    debug: bool = False

    # PostgreSQL connection, used when DATABASE_DSN is not set
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "notedesk"

    # Any SQLAlchemy async URL, e.g. sqlite+aiosqlite:///./data/notedesk.db
    database_dsn: str | None = None

    api_host: str = "0.0.0.0"
    api_port: int = 3500
    api_debug: bool = False
    # Comma-separated; empty disables CORS
    api_cors_origins: str = ""

    password_hash_rounds: int = 10

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_origin_list(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value) if value else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """``database_dsn`` if given, else an asyncpg URL from the POSTGRES_ fields."""
        if self.database_dsn:
            return self.database_dsn
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        origins = (origin.strip() for origin in self.api_cors_origins.split(","))
        return [origin for origin in origins if origin]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached settings; the next ``get_settings()`` reloads them."""
    get_settings.cache_clear()
