"""User domain manages shopper and administrator identity.

This domain handles:
- User aggregate (id, email, display name, role)
- Profile updates

Passwords and tokens are handled by shopfront_auth.
"""

from shopfront.domain.user.aggregates import User
from shopfront.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from shopfront.domain.user.repositories import UserRepository
from shopfront.domain.user.value_objects import (
    Email,
    UserRole,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
