"""Database initialization utilities."""

import logging

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Import models to register with the metadata
import shopfront.infrastructure.persistence.sqlalchemy.models  # noqa: F401
import shopfront_auth.persistence.sqlalchemy.models  # noqa: F401
from shopfront.infrastructure.persistence.sqlalchemy.models.base import Base
from shopfront_auth.persistence.sqlalchemy import AuthBase
from shopfront_config.settings import get_settings

logger = logging.getLogger(__name__)

ALL_METADATA: tuple[MetaData, ...] = (Base.metadata, AuthBase.metadata)


def create_engine_from_settings() -> AsyncEngine:
    """Create an async engine for the configured database."""
    return create_async_engine(
        get_settings().database_url,
        echo=False,
        pool_pre_ping=True,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        for metadata in ALL_METADATA:
            await conn.run_sync(metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")

