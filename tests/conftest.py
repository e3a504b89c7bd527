"""Test-session setup: env file, markers and the integration opt-in.

All tests stay visible to the test explorer; tests that need Docker are
skipped unless explicitly enabled via environment variables or pytest
options.

Test Structure:
    tests/
    ├── notedesk/              # API, notes and persistence tests
    │   ├── unit/              # Fast, isolated tests (in-memory SQLite)
    │   └── integration/       # Tests against the running application
    ├── notedesk_identity/     # User lifecycle tests
    │   ├── unit/
    │   └── integration/       # Testcontainers PostgreSQL
    ├── notedesk_config/       # Settings tests
    └── shared/                # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from notedesk_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    """--run-integration and --run-all."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Also run PostgreSQL tests (needs Docker)",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run every test, ignoring skip markers",
    )


def pytest_configure(config):
    """Declare the markers used in this suite."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need a PostgreSQL container (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that need more than a second",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    if config.getoption("--run-all") or _env_flag("RUN_ALL_TESTS"):
        return

    run_integration = config.getoption("--run-integration") or _env_flag(
        "RUN_INTEGRATION",
    )
    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="needs PostgreSQL: pass --run-integration or set RUN_INTEGRATION=1",
    )
    for item in items:
        # Explicit marker only, not folder name
        if "integration" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
