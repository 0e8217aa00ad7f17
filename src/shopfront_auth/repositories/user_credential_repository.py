"""Password credential storage port."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserCredentialData:
    user_id: str
    password_hash: str
    last_login_at: datetime | None


class UserCredentialRepository(ABC):
    """At most one password hash per user.

    Users are referenced by ID only, so this package does not depend on
    whatever table the application keeps its users in.
    """

    @abstractmethod
    async def save(self, user_id: UUID, password_hash: str) -> UserCredentialData:
        """Store ``password_hash``, replacing any earlier hash for the user."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> UserCredentialData | None:
        pass

    @abstractmethod
    async def update_last_login(self, user_id: UUID) -> None:
        """Stamp the current time; a no-op for users without credentials."""
