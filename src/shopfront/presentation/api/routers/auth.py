"""Account creation and the access/refresh token round trip."""

import logging
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status

from shopfront.domain.user import User
from shopfront.presentation.api.config import get_api_settings
from shopfront.presentation.api.dependencies import AuthService, DBSession
from shopfront.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserSummary,
)
from shopfront.presentation.api.schemas.common import ApiResponse, MessageResponse
from shopfront_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()

SettingsDep = Annotated[Settings, Depends(get_api_settings)]

REFRESH_TOKEN_COOKIE = "refresh_token"  # NOQA: S105
REFRESH_TOKEN_COOKIE_PATH = "/api/v1/auth"  # NOQA: S105


def _set_refresh_token_cookie(
    response: Response,
    token: str,
    settings: Settings,
) -> None:
    """HttpOnly cookie, scoped to the auth routes, living as long as the token."""
    response.set_cookie(
        key=REFRESH_TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.api_cookie_secure,
        samesite=settings.api_cookie_samesite,
        max_age=settings.jwt_refresh_token_expire_days * 86400,
        path=REFRESH_TOKEN_COOKIE_PATH,
        domain=settings.api_cookie_domain,
    )


def _clear_refresh_token_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=REFRESH_TOKEN_COOKIE,
        path=REFRESH_TOKEN_COOKIE_PATH,
        domain=settings.api_cookie_domain,
        httponly=True,
        secure=settings.api_cookie_secure,
        samesite=settings.api_cookie_samesite,
    )


def _create_auth_response(
    user: User,
    access_token: str,
    refresh_token: str,
    settings: Settings,
) -> ApiResponse[AuthResponse]:
    return ApiResponse(
        data=AuthResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=settings.jwt_access_token_expire_hours * 3600,
            user=UserSummary.from_user(user),
        ),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new customer",
    responses={
        400: {"description": "Password too short or too long"},
        409: {"description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    response: Response,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> ApiResponse[AuthResponse]:
    """
    Register a new CUSTOMER account.

    Creates the user, its credentials and an empty cart, and returns a
    token pair. The refresh token is also set as an HttpOnly cookie.
    """
    try:
        user, access_token, refresh_token = await auth_service.register(
            email=request.email,
            password=request.password,
            name=request.name,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    _set_refresh_token_cookie(response, refresh_token, settings)
    return _create_auth_response(user, access_token, refresh_token, settings)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> ApiResponse[AuthResponse]:
    """
    Authenticate with email and password.

    Unknown email and wrong password produce the same error.
    """
    try:
        user, access_token, refresh_token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    _set_refresh_token_cookie(response, refresh_token, settings)
    return _create_auth_response(user, access_token, refresh_token, settings)


@router.post(
    "/refresh",
    summary="Refresh access token",
    responses={
        200: {"description": "New access token issued"},
        401: {"description": "Missing, invalid or revoked refresh token"},
    },
)
async def refresh_access_token(
    auth_service: AuthService,
    settings: SettingsDep,
    refresh_token_cookie: Annotated[
        str | None,
        Cookie(alias=REFRESH_TOKEN_COOKIE),
    ] = None,
) -> ApiResponse[TokenResponse]:
    """
    Get a new access token using the refresh token cookie.

    The refresh token itself is not rotated.
    """
    if not refresh_token_cookie:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No refresh token provided",
        )

    _, access_token = await auth_service.refresh_access_token(refresh_token_cookie)

    return ApiResponse(
        data=TokenResponse(
            access_token=access_token,
            expires_in=settings.jwt_access_token_expire_hours * 3600,
        ),
    )


@router.post(
    "/logout",
    summary="Logout user",
    responses={
        200: {"description": "Logged out (always succeeds)"},
    },
)
async def logout(
    response: Response,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
    refresh_token_cookie: Annotated[
        str | None,
        Cookie(alias=REFRESH_TOKEN_COOKIE),
    ] = None,
) -> ApiResponse[MessageResponse]:
    """Revoke the stored refresh tokens of the cookie's owner and clear it."""
    try:
        await auth_service.logout(refresh_token_cookie)
        await session.commit()
    except Exception as e:
        await session.rollback()
        # Logout never fails from the caller's point of view
        logger.warning("Refresh token revocation failed during logout: %s", e)

    _clear_refresh_token_cookie(response, settings)
    return ApiResponse(data=MessageResponse(message="Logged out"))
