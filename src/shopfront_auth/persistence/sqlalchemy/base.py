"""SQLAlchemy declarative base for shopfront_auth models.

This provides a separate Base for auth models. The consuming application
creates AuthBase.metadata alongside its own metadata.

Examples
--------
from shopfront.infrastructure.persistence.sqlalchemy.models.base import Base
from shopfront_auth.persistence.sqlalchemy import AuthBase

for metadata in (Base.metadata, AuthBase.metadata):
    await conn.run_sync(metadata.create_all)
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for shopfront_auth models."""
