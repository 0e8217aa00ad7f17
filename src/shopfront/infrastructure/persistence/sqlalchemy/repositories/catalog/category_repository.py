"""SQLAlchemy implementation of CategoryRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.domain.catalog import Category, CategoryRepository
from shopfront.infrastructure.persistence.sqlalchemy.models import (
    CategoryModel,
    ProductModel,
)

logger = logging.getLogger(__name__)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    """SQLAlchemy implementation of the CategoryRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        model = await self._find_model_by_id(category_id)
        return self._map_to_domain(model) if model else None

    async def find_conflicting(
        self,
        name: str,
        slug: str,
        exclude_id: Optional[UUID] = None,
    ) -> Optional[Category]:
        stmt = select(CategoryModel).where(
            or_(
                func.lower(CategoryModel.name) == name.lower(),
                CategoryModel.slug == slug,
            ),
        )
        if exclude_id is not None:
            stmt = stmt.where(CategoryModel.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        model = result.scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def list_with_product_counts(self) -> list[tuple[Category, int]]:
        stmt = (
            select(CategoryModel, func.count(ProductModel.id))
            .outerjoin(ProductModel, ProductModel.category_id == CategoryModel.id)
            .group_by(CategoryModel.id)
            .order_by(CategoryModel.name)
        )
        result = await self._session.execute(stmt)
        return [(self._map_to_domain(model), count) for model, count in result.all()]

    async def count_products(self, category_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(ProductModel)
            .where(ProductModel.category_id == category_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def save(self, category: Category) -> None:
        existing = await self._find_model_by_id(category.id)

        if existing:
            existing.name = category.name
            existing.slug = category.slug
            existing.description = category.description
            logger.debug("Updated category: %s", category.id)
        else:
            self._session.add(
                CategoryModel(
                    id=category.id,
                    name=category.name,
                    slug=category.slug,
                    description=category.description,
                    created_at=category.created_at,
                ),
            )
            logger.debug("Created category: %s", category.id)

        await self._session.flush()

    async def delete(self, category_id: UUID) -> None:
        model = await self._find_model_by_id(category_id)
        if model:
            await self._session.delete(model)
            await self._session.flush()

    async def _find_model_by_id(self, category_id: UUID) -> CategoryModel | None:
        stmt = select(CategoryModel).where(CategoryModel.id == category_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: CategoryModel) -> Category:
        return Category.reconstitute(
            id=model.id,
            name=model.name,
            description=model.description,
            created_at=model.created_at,
        )
