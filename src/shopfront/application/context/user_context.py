"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from shopfront.domain.user import UserRole


@dataclass(frozen=True)
class UserContext:
    """Immutable identity of the authenticated caller.

    Built from a verified access token; handlers never re-derive it.
    """

    user_id: UUID
    role: UserRole = UserRole.CUSTOMER

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def from_values(cls, user_id: UUID, role: str | UserRole | None) -> UserContext:
        resolved = UserRole(role) if role else UserRole.CUSTOMER
        return cls(user_id=user_id, role=resolved)

    def __str__(self) -> str:
        return f"UserContext({self.user_id})"
