"""Profile router: self-service account details."""

from fastapi import APIRouter

from shopfront.application.commands.user import UpdateProfileCommand
from shopfront.domain.user import UserNotFoundError
from shopfront.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    RepoFactory,
)
from shopfront.presentation.api.schemas.auth import (
    ProfileResponse,
    UpdateProfileRequest,
)
from shopfront.presentation.api.schemas.common import ApiResponse

router = APIRouter()


@router.get(
    "",
    summary="Get profile",
    responses={200: {"description": "The caller's profile"}},
)
async def get_profile(
    user: CurrentUser,
    factory: RepoFactory,
) -> ApiResponse[ProfileResponse]:
    found = await factory.user_repository().find_by_id(user.user_id)
    if found is None:
        raise UserNotFoundError(user.user_id)
    return ApiResponse(data=ProfileResponse.from_user(found))


@router.put(
    "",
    summary="Update profile",
    responses={
        200: {"description": "Profile updated"},
        400: {"description": "Invalid input or missing current password"},
        401: {"description": "Current password is incorrect"},
        409: {"description": "Email already registered"},
    },
)
async def update_profile(
    request: UpdateProfileRequest,
    user: CurrentUser,
    factory: RepoFactory,
    auth_service: AuthService,
) -> ApiResponse[ProfileResponse]:
    """Update name and email; a new password needs the current password."""
    command = UpdateProfileCommand.from_factory(factory, auth_service, user)

    try:
        updated = await command.execute(
            name=request.name,
            email=request.email,
            current_password=request.current_password,
            new_password=request.new_password,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(data=ProfileResponse.from_user(updated))
