"""User domain exceptions."""

from uuid import UUID

from shopfront.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            message="Email address is already registered",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: UUID | str) -> None:
        self.user_id = user_id
        super().__init__(
            message="User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )
