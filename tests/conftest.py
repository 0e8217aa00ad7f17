"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (no database)
    │   ├── shopfront_auth/ # JWT and password services
    │   ├── domain/        # Aggregates, entities, value objects
    │   └── application/   # Services and commands with mocked repositories
    ├── integration/       # Tests against a temporary SQLite database
    │   ├── persistence/   # Repositories
    │   ├── application/   # Commands running in real transactions
    │   ├── api/           # HTTP endpoints through the TestClient
    │   └── cli/           # Typer commands through the CliRunner
    └── shared/            # Shared fixtures and utilities

Required settings are provided through environment variables before any
application module is imported.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development), then pin the values
# the tests rely on.
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")

os.environ["JWT_SECRET_KEY"] = "test-jwt-secret-for-testing-only"
os.environ["JWT_REFRESH_SECRET_KEY"] = "test-jwt-refresh-secret-for-testing-only"
os.environ["POSTGRES_PASSWORD"] = "test-password"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["API_COOKIE_SECURE"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

from shopfront_config import clear_settings_cache  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that run against a real (SQLite) database",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Re-read settings for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
