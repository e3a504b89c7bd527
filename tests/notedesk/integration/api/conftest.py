"""Pytest fixtures for API tests.

The application runs its own lifespan against a SQLite file in the test's
temporary directory, so each test starts with an empty database.
"""

from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from notedesk.infrastructure.persistence.sqlalchemy.models import NoteModel
from notedesk.presentation.api.app import create_app
from notedesk_config.settings import Settings


@pytest.fixture
def database_path(tmp_path) -> str:
    return str(tmp_path / "notedesk.db")


@pytest.fixture
def api_settings(database_path) -> Settings:
    """Test API settings with debug enabled and a cheap hash work factor."""
    return Settings(
        database_dsn=f"sqlite+aiosqlite:///{database_path}",
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def test_client(api_settings):
    """Test client with the application lifespan running."""
    app = create_app(settings=api_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def add_note(database_path):
    """Insert a note for a user directly, as the notes feature would."""

    def _add_note(user_id: str, title: str = "Fix printer") -> None:
        engine = create_engine(f"sqlite:///{database_path}")
        try:
            with Session(engine) as session:
                session.add(
                    NoteModel(
                        id=uuid4(),
                        user_id=UUID(user_id),
                        title=title,
                        text="Third floor",
                    )
                )
                session.commit()
        finally:
            engine.dispose()

    return _add_note


@pytest.fixture
def create_user(test_client):
    """Create a user through the API and return its id."""

    def _create_user(username: str, password: str = "pw", roles=None) -> str:
        body = {"username": username, "password": password}
        if roles is not None:
            body["roles"] = roles
        response = test_client.post("/users", json=body)
        assert response.status_code == 201, response.text

        users = test_client.get("/users").json()
        return next(u["id"] for u in users if u["username"] == username)

    return _create_user
