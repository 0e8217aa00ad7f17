"""SQLAlchemy implementation of WishlistRepository."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.domain.wishlist import WishlistItem, WishlistRepository
from shopfront.infrastructure.persistence.sqlalchemy.models import (
    ProductModel,
    WishlistItemModel,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.catalog import (
    map_product_to_domain,
)


class WishlistRepositorySQLAlchemy(WishlistRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_user(self, user_id: UUID) -> list[WishlistItem]:
        stmt = (
            select(WishlistItemModel, ProductModel)
            .join(ProductModel, ProductModel.id == WishlistItemModel.product_id)
            .where(WishlistItemModel.user_id == user_id)
            .order_by(WishlistItemModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [
            WishlistItem(
                id=item_model.id,
                user_id=item_model.user_id,
                product=map_product_to_domain(product_model),
                created_at=item_model.created_at,
            )
            for item_model, product_model in result.all()
        ]

    async def exists(self, user_id: UUID, product_id: UUID) -> bool:
        stmt = (
            select(func.count())
            .select_from(WishlistItemModel)
            .where(
                WishlistItemModel.user_id == user_id,
                WishlistItemModel.product_id == product_id,
            )
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def add(self, item: WishlistItem) -> None:
        self._session.add(
            WishlistItemModel(
                id=item.id,
                user_id=item.user_id,
                product_id=item.product_id,
                created_at=item.created_at,
            ),
        )
        await self._session.flush()

    async def remove(self, user_id: UUID, product_id: UUID) -> bool:
        stmt = delete(WishlistItemModel).where(
            WishlistItemModel.user_id == user_id,
            WishlistItemModel.product_id == product_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)  # type: ignore
