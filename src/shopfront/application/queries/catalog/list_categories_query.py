"""List categories with their product counts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from shopfront.domain.catalog import Category, CategoryRepository

if TYPE_CHECKING:
    from shopfront.application.factories import RepositoryFactory


@dataclass(frozen=True)
class CategorySummary:
    category: Category
    product_count: int


class ListCategoriesQuery:
    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(self) -> list[CategorySummary]:
        rows = await self._category_repo.list_with_product_counts()
        return [
            CategorySummary(category=category, product_count=count)
            for category, count in rows
        ]
