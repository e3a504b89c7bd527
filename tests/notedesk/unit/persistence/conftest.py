"""Fixtures for note repository tests on in-memory SQLite."""

from tests.shared.fixtures.database import sqlite_engine, sqlite_session  # noqa: F401
