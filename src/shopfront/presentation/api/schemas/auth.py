"""Authentication request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from shopfront.domain.user import User


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=128,
        description="Password (8-128 characters)",
    )
    name: str = Field(..., min_length=1, max_length=100, description="Display name")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "a@b.com",
                "password": "password123",
                "name": "Ada",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")


class UserSummary(BaseModel):
    """The user summary returned with every token pair."""

    id: UUID
    email: str
    name: str
    role: str

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(id=user.id, email=user.email, name=user.name, role=user.role.value)


class AuthResponse(BaseModel):
    """Token pair plus user summary.

    The refresh token is also set as an HttpOnly cookie.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"  # NOQA: S105
    expires_in: int = Field(..., description="Access token lifetime in seconds")
    user: UserSummary


class TokenResponse(BaseModel):
    """Response schema for the refresh endpoint."""

    access_token: str
    token_type: str = "bearer"  # NOQA: S105
    expires_in: int = Field(..., description="Access token lifetime in seconds")


class ProfileResponse(BaseModel):
    id: UUID
    email: str
    name: str
    role: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "ProfileResponse":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=user.role.value,
            created_at=user.created_at,
        )


class UpdateProfileRequest(BaseModel):
    """Partial profile update. Setting ``new_password`` needs ``current_password``."""

    name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    current_password: str | None = None
    new_password: str | None = Field(None, min_length=8, max_length=128)
