"""Storage port for user accounts."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from shopfront.domain.user.aggregates.user import User
from shopfront.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Users by ID or by their (lower-cased) email address."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UUID]) -> dict[UUID, User]:
        """Batch lookup; unknown IDs are simply absent from the result."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        pass

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        pass

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or update.

        Raises
        ------
        EmailAlreadyExistsError
            If another account already holds the email.
        """
