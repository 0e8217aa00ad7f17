"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from shopfront.domain.catalog.entities import Category


class CategoryRepository(ABC):
    """Repository interface for Category entities."""

    @abstractmethod
    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find a category by ID."""

    @abstractmethod
    async def find_conflicting(
        self,
        name: str,
        slug: str,
        exclude_id: Optional[UUID] = None,
    ) -> Optional[Category]:
        """Find another category that already uses this name or slug."""

    @abstractmethod
    async def list_with_product_counts(self) -> list[tuple[Category, int]]:
        """List all categories by name with the number of products in each."""

    @abstractmethod
    async def count_products(self, category_id: UUID) -> int:
        """Count the products assigned to a category."""

    @abstractmethod
    async def save(self, category: Category) -> None:
        """Create or update a category."""

    @abstractmethod
    async def delete(self, category_id: UUID) -> None:
        """Delete a category."""
