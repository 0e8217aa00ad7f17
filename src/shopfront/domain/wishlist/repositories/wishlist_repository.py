"""Wishlist repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from shopfront.domain.wishlist.entities import WishlistItem


class WishlistRepository(ABC):
    """Repository interface for wishlist entries."""

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> list[WishlistItem]:
        """List a user's wishlist entries with products, newest first."""

    @abstractmethod
    async def exists(self, user_id: UUID, product_id: UUID) -> bool:
        """Check whether the product is on the user's wishlist."""

    @abstractmethod
    async def add(self, item: WishlistItem) -> None:
        """Insert a wishlist entry."""

    @abstractmethod
    async def remove(self, user_id: UUID, product_id: UUID) -> bool:
        """Remove an entry. Returns False if it was not there."""
