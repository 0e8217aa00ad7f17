"""SQLAlchemy implementation of ProductRepository."""

import logging
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.domain.catalog import Product, ProductInUseError, ProductRepository
from shopfront.infrastructure.persistence.sqlalchemy.models import (
    CartItemModel,
    OrderItemModel,
    ProductImageModel,
    ProductModel,
    WishlistItemModel,
)

logger = logging.getLogger(__name__)


def map_product_to_domain(model: ProductModel) -> Product:
    """Map a ProductModel (with images loaded) to the Product entity."""
    return Product.reconstitute(
        id=model.id,
        name=model.name,
        description=model.description,
        price=model.price,
        stock=model.stock,
        category_id=model.category_id,
        images=[image.url for image in model.images],
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _image_models(urls: list[str]) -> list[ProductImageModel]:
    return [
        ProductImageModel(id=uuid4(), url=url, position=position)
        for position, url in enumerate(urls)
    ]


class ProductRepositorySQLAlchemy(ProductRepository):
    """SQLAlchemy implementation of the ProductRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, product_id: UUID) -> Optional[Product]:
        model = await self._find_model_by_id(product_id)
        return map_product_to_domain(model) if model else None

    async def find_by_ids(self, product_ids: list[UUID]) -> dict[UUID, Product]:
        if not product_ids:
            return {}
        stmt = (
            select(ProductModel)
            .where(ProductModel.id.in_(set(product_ids)))
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return {model.id: map_product_to_domain(model) for model in result.scalars()}

    async def list_products(
        self,
        category_id: Optional[UUID] = None,
        skip: int = 0,
        take: int = 20,
    ) -> tuple[list[Product], int]:
        filters = []
        if category_id is not None:
            filters.append(ProductModel.category_id == category_id)

        count_stmt = select(func.count()).select_from(ProductModel).where(*filters)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(ProductModel)
            .where(*filters)
            .order_by(ProductModel.created_at.desc(), ProductModel.id)
            .offset(skip)
            .limit(take)
        )
        result = await self._session.execute(stmt)
        products = [map_product_to_domain(model) for model in result.scalars()]
        return products, total

    async def save(self, product: Product) -> None:
        existing = await self._find_model_by_id(product.id)

        if existing:
            existing.name = product.name
            existing.description = product.description
            existing.price = product.price
            # A checkout may have taken stock since the product was read
            if product.stock_changed:
                existing.stock = product.stock
            existing.category_id = product.category_id
            existing.updated_at = product.updated_at
            if [image.url for image in existing.images] != product.images:
                existing.images = _image_models(product.images)
            logger.debug("Updated product: %s", product.id)
        else:
            model = ProductModel(
                id=product.id,
                name=product.name,
                description=product.description,
                price=product.price,
                stock=product.stock,
                category_id=product.category_id,
                images=_image_models(product.images),
                created_at=product.created_at,
                updated_at=product.updated_at,
            )
            self._session.add(model)
            logger.debug("Created product: %s", product.id)

        await self._session.flush()

    async def delete(self, product_id: UUID) -> None:
        await self._session.execute(
            delete(CartItemModel).where(CartItemModel.product_id == product_id),
        )
        await self._session.execute(
            delete(WishlistItemModel).where(WishlistItemModel.product_id == product_id),
        )

        model = await self._find_model_by_id(product_id)
        if model:
            # Images go with the product (delete-orphan cascade)
            await self._session.delete(model)

        # An order placed after the reference check trips the RESTRICT key
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise ProductInUseError(product_id) from e

    async def is_referenced_by_orders(self, product_id: UUID) -> bool:
        stmt = (
            select(func.count())
            .select_from(OrderItemModel)
            .where(OrderItemModel.product_id == product_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def decrement_stock(self, product_id: UUID, quantity: int) -> bool:
        # Check and decrement happen in one statement, so two concurrent
        # placements can never both take the last unit.
        stmt = (
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.stock >= quantity)
            .values(stock=ProductModel.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1  # type: ignore

    async def _find_model_by_id(self, product_id: UUID) -> ProductModel | None:
        # populate_existing: stock must never be served from the identity map
        stmt = (
            select(ProductModel)
            .where(ProductModel.id == product_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
