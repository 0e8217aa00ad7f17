"""Cart repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from shopfront.domain.cart.aggregates import Cart


class CartRepository(ABC):
    """Repository interface for the Cart aggregate."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> Optional[Cart]:
        """Load a user's cart with its line items and their live products."""

    @abstractmethod
    async def get_or_create(self, user_id: UUID) -> Cart:
        """Load the user's cart, creating an empty one if absent.

        Must be idempotent, also when two requests race to create it.
        """

    @abstractmethod
    async def save(self, cart: Cart) -> None:
        """Persist the cart's line items (insert, update and remove)."""

    @abstractmethod
    async def remove_items(self, cart: Cart) -> bool:
        """Delete exactly the line items loaded into ``cart``.

        Returns
        -------
        False if any of those lines was already gone, meaning another
        checkout converted the cart first
        """
