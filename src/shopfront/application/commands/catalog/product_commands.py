"""Admin commands for managing products."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from shopfront.domain.catalog import (
    CategoryNotFoundError,
    CategoryRepository,
    Product,
    ProductInUseError,
    ProductNotFoundError,
    ProductRepository,
)

if TYPE_CHECKING:
    from shopfront.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateProductCommand:
    """Create a product in an existing category."""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
    ):
        self._product_repo = product_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateProductCommand:
        return cls(
            product_repository=factory.product_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(  # NOQA: PLR0913
        self,
        name: str,
        price: Decimal,
        category_id: UUID,
        description: str = "",
        stock: int = 0,
        images: Optional[list[str]] = None,
    ) -> Product:
        # Build first so field validation wins over the category lookup
        product = Product(
            name=name,
            price=price,
            category_id=category_id,
            description=description,
            stock=stock,
            images=images,
        )

        if await self._category_repo.find_by_id(category_id) is None:
            raise CategoryNotFoundError(category_id)

        await self._product_repo.save(product)
        logger.info("Product created: %s (%s)", product.id, product.name)
        return product


class UpdateProductCommand:
    """Partially update a product. An ``images`` list replaces all images."""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
    ):
        self._product_repo = product_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateProductCommand:
        return cls(
            product_repository=factory.product_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(  # NOQA: PLR0913
        self,
        product_id: UUID,
        name: Optional[str] = None,
        description: Optional[str] = None,
        price: Optional[Decimal] = None,
        stock: Optional[int] = None,
        category_id: Optional[UUID] = None,
        images: Optional[list[str]] = None,
    ) -> Product:
        product = await self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        if category_id is not None and category_id != product.category_id:
            if await self._category_repo.find_by_id(category_id) is None:
                raise CategoryNotFoundError(category_id)

        product.update(
            name=name,
            description=description,
            price=price,
            stock=stock,
            category_id=category_id,
            images=images,
        )
        await self._product_repo.save(product)

        logger.info("Product updated: %s", product.id)
        return product


class DeleteProductCommand:
    """Delete a product that no order references."""

    def __init__(self, product_repository: ProductRepository):
        self._product_repo = product_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteProductCommand:
        return cls(product_repository=factory.product_repository())

    async def execute(self, product_id: UUID) -> None:
        product = await self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        if await self._product_repo.is_referenced_by_orders(product_id):
            raise ProductInUseError(product_id)

        await self._product_repo.delete(product_id)
        logger.info("Product deleted: %s", product_id)
