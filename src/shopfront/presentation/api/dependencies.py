"""Request-scoped dependencies for the Shopfront routers.

Each request gets one database session, a repository factory bound to it,
and the caller identity read from the bearer token.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from shopfront.application.context import UserContext
from shopfront.application.services import AuthenticationService
from shopfront.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from shopfront.presentation.api.config import get_api_settings
from shopfront_auth import InvalidTokenError, JWTService, PasswordHashingService
from shopfront_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


@lru_cache()
def get_database_url() -> str:
    """Get database URL from application settings."""
    url = get_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# Engine and sessions


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide engine; its pool is shared by every request."""
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield the request's session.

    Routers commit or roll back this session; it is the unit of work for
    the whole request.
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Get a repository factory bound to the request's session."""
    return SQLAlchemyRepositoryFactory(session=session)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# Token and password services


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Token service; refresh tokens use their own secret when one is set."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        refresh_secret_key=settings.refresh_secret_key,
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
        refresh_token_expire_days=settings.jwt_refresh_token_expire_days,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


async def get_authentication_service(
    factory: RepoFactory,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Registration, login and refresh over the request's repositories."""
    return AuthenticationService.from_factory(
        factory,
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# Caller identity


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UserContext:
    """
    Resolve the caller from the bearer token.

    Only access tokens are accepted. The identity comes from the token
    claims alone, without a database lookup.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid, expired or a refresh token
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = jwt_service.verify_access_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected access token: %s", e)
        raise _unauthorized("Invalid or expired token") from e

    try:
        return UserContext.from_values(payload.user_id, payload.role)
    except ValueError as e:
        logger.warning("Access token with unknown role for user %s", payload.user_id)
        raise _unauthorized("Invalid token") from e


CurrentUser = Annotated[UserContext, Depends(get_current_identity)]


async def require_admin(user: CurrentUser) -> UserContext:
    """403 unless the caller is an ADMIN."""
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


AdminUser = Annotated[UserContext, Depends(require_admin)]

