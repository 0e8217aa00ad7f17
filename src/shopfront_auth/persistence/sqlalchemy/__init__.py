"""SQLAlchemy implementation for shopfront_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserCredentialModel / RefreshTokenModel: SQLAlchemy models
- Repository implementations for both

Note: The consuming application must create AuthBase.metadata tables
next to its own (see ``shopfront.infrastructure.persistence.sqlalchemy.init_db``).
"""

from shopfront_auth.persistence.sqlalchemy.base import AuthBase
from shopfront_auth.persistence.sqlalchemy.models import (
    RefreshTokenModel,
    UserCredentialModel,
)
from shopfront_auth.persistence.sqlalchemy.repositories import (
    RefreshTokenRepositorySQLAlchemy,
    UserCredentialRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "RefreshTokenModel",
    "RefreshTokenRepositorySQLAlchemy",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
]
