"""Public product catalog queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from shopfront.domain.catalog import Product, ProductNotFoundError, ProductRepository

if TYPE_CHECKING:
    from shopfront.application.factories import RepositoryFactory

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass
class ProductListResult:
    """One page of products plus the total number of matches."""

    products: list[Product]
    total: int
    skip: int
    take: int


class ListProductsQuery:
    """List products, optionally filtered by category, newest first."""

    def __init__(self, product_repository: ProductRepository):
        self._product_repo = product_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListProductsQuery:
        return cls(product_repository=factory.product_repository())

    async def execute(
        self,
        category_id: Optional[UUID] = None,
        skip: int = 0,
        take: int = DEFAULT_PAGE_SIZE,
    ) -> ProductListResult:
        skip = max(skip, 0)
        take = min(max(take, 1), MAX_PAGE_SIZE)
        products, total = await self._product_repo.list_products(
            category_id=category_id,
            skip=skip,
            take=take,
        )
        return ProductListResult(products=products, total=total, skip=skip, take=take)


class GetProductQuery:
    def __init__(self, product_repository: ProductRepository):
        self._product_repo = product_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetProductQuery:
        return cls(product_repository=factory.product_repository())

    async def execute(self, product_id: UUID) -> Product:
        product = await self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
