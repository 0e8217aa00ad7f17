"""Admin commands for managing categories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from shopfront.domain.catalog import (
    Category,
    CategoryAlreadyExistsError,
    CategoryInUseError,
    CategoryNotFoundError,
    CategoryRepository,
)

if TYPE_CHECKING:
    from shopfront.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateCategoryCommand:
    """Create a category; its name and derived slug must both be unused."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, name: str, description: Optional[str] = None) -> Category:
        category = Category(name=name, description=description)

        if await self._category_repo.find_conflicting(category.name, category.slug):
            raise CategoryAlreadyExistsError(category.name, category.slug)

        await self._category_repo.save(category)
        logger.info("Category created: %s (%s)", category.id, category.slug)
        return category


class UpdateCategoryCommand:
    """Rename a category and replace its description."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(
        self,
        category_id: UUID,
        name: str,
        description: Optional[str] = None,
    ) -> Category:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        category.update(name=name, description=description)

        conflict = await self._category_repo.find_conflicting(
            category.name,
            category.slug,
            exclude_id=category.id,
        )
        if conflict:
            raise CategoryAlreadyExistsError(category.name, category.slug)

        await self._category_repo.save(category)
        logger.info("Category updated: %s", category.id)
        return category


class DeleteCategoryCommand:
    """Delete a category. Blocked while any product is assigned to it."""

    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, category_id: UUID) -> None:
        category = await self._category_repo.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        product_count = await self._category_repo.count_products(category_id)
        if product_count:
            raise CategoryInUseError(category_id, product_count)

        await self._category_repo.delete(category_id)
        logger.info("Category deleted: %s", category_id)
