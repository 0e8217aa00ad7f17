"""Shopfront Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the shop domain. It handles:
- Password hashing (bcrypt)
- JWT access and refresh token creation and verification
- Credential and refresh token storage (with pluggable persistence)

Architecture:
    shopfront_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions
"""

from shopfront_auth.exceptions import (
    AuthError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from shopfront_auth.repositories import (
    RefreshTokenRepository,
    UserCredentialRepository,
)
from shopfront_auth.schemas import TokenPayload
from shopfront_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Repositories (interfaces)
    "RefreshTokenRepository",
    "UserCredentialRepository",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
