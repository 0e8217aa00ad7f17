"""Product repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from shopfront.domain.catalog.entities import Product


class ProductRepository(ABC):
    """Repository interface for Product entities."""

    @abstractmethod
    async def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by ID, always reading the current stock."""

    @abstractmethod
    async def find_by_ids(self, product_ids: list[UUID]) -> dict[UUID, Product]:
        """Find several products at once, keyed by ID."""

    @abstractmethod
    async def list_products(
        self,
        category_id: Optional[UUID] = None,
        skip: int = 0,
        take: int = 20,
    ) -> tuple[list[Product], int]:
        """List a page of products (newest first) and the total match count."""

    @abstractmethod
    async def save(self, product: Product) -> None:
        """Create or update a product, replacing its images.

        On update, stock is written only when the edit set it.
        """

    @abstractmethod
    async def delete(self, product_id: UUID) -> None:
        """Delete a product with its images, cart lines and wishlist entries."""

    @abstractmethod
    async def is_referenced_by_orders(self, product_id: UUID) -> bool:
        """Check whether any order item references the product."""

    @abstractmethod
    async def decrement_stock(self, product_id: UUID, quantity: int) -> bool:
        """Atomically decrement stock if at least ``quantity`` is available.

        Returns
        -------
        True if the stock was decremented, False if it would go negative
        """
