"""Abstract repository interface for refresh tokens."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RefreshTokenData:
    """Immutable refresh token record.

    Only the SHA-256 hash of the issued token is ever stored.
    """

    id: UUID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Check if the token has expired."""
        return now > self.expires_at


class RefreshTokenRepository(ABC):
    """Abstract repository for hashed refresh tokens.

    A user may hold several tokens at once, one per open session.
    """

    @abstractmethod
    async def create(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
    ) -> UUID:
        """Store a new refresh token hash.

        Parameters
        ----------
        user_id
            The user's unique identifier
        token_hash
            SHA-256 hash of the raw token
        expires_at
            When the token expires

        Returns
        -------
        The token record's unique identifier
        """

    @abstractmethod
    async def find_valid_by_hash(
        self,
        user_id: UUID,
        token_hash: str,
    ) -> RefreshTokenData | None:
        """Find a non-expired token of the given user by its hash.

        Parameters
        ----------
        user_id
            The user's unique identifier
        token_hash
            SHA-256 hash of the raw token

        Returns
        -------
        Token data if found and not expired, None otherwise
        """

    @abstractmethod
    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every stored token of a user.

        Returns
        -------
        Number of tokens deleted
        """

    @abstractmethod
    async def cleanup_expired(self) -> int:
        """Remove expired tokens from the database.

        Returns
        -------
        Number of tokens deleted
        """
