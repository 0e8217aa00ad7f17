"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    session_maker,
)
from tests.shared.fixtures.factories import TestCatalogFactory, TestUserFactory

__all__ = [
    "async_engine",
    "db_session",
    "session_maker",
    "TestCatalogFactory",
    "TestUserFactory",
]
