"""SQLAlchemy implementation of CartRepository."""

import logging
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.domain.cart import Cart, CartItem, CartRepository
from shopfront.infrastructure.persistence.sqlalchemy.models import (
    CartItemModel,
    CartModel,
    ProductModel,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.catalog import (
    map_product_to_domain,
)

logger = logging.getLogger(__name__)


class CartRepositorySQLAlchemy(CartRepository):
    """SQLAlchemy implementation of the CartRepository interface.

    Line items are loaded together with their products so subtotals and
    stock checks always see live prices and stock.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_user_id(self, user_id: UUID) -> Optional[Cart]:
        stmt = select(CartModel).where(CartModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return await self._load_aggregate(model)

    async def get_or_create(self, user_id: UUID) -> Cart:
        cart = await self.find_by_user_id(user_id)
        if cart is not None:
            return cart

        cart = Cart.create(user_id)
        try:
            # Savepoint: losing the unique(user_id) race must not poison
            # the surrounding transaction.
            async with self._session.begin_nested():
                self._session.add(
                    CartModel(
                        id=cart.id,
                        user_id=user_id,
                        created_at=cart.created_at,
                    ),
                )
        except IntegrityError:
            logger.debug("Cart for user %s created concurrently, reloading", user_id)
            existing = await self.find_by_user_id(user_id)
            if existing is None:
                raise
            return existing

        logger.debug("Created cart %s for user %s", cart.id, user_id)
        return cart

    async def save(self, cart: Cart) -> None:
        stmt = select(CartItemModel).where(CartItemModel.cart_id == cart.id)
        result = await self._session.execute(stmt)
        stored = {model.product_id: model for model in result.scalars()}
        wanted = {item.product_id: item for item in cart.items}

        for product_id, model in stored.items():
            if product_id not in wanted:
                await self._session.delete(model)

        for product_id, item in wanted.items():
            model = stored.get(product_id)
            if model is None:
                self._session.add(
                    CartItemModel(
                        id=item.id or uuid4(),
                        cart_id=cart.id,
                        product_id=product_id,
                        quantity=item.quantity,
                    ),
                )
            elif model.quantity != item.quantity:
                model.quantity = item.quantity

        await self._session.flush()

    async def remove_items(self, cart: Cart) -> bool:
        line_ids = [item.id for item in cart.items]
        if not line_ids:
            return True
        result = await self._session.execute(
            delete(CartItemModel).where(
                CartItemModel.cart_id == cart.id,
                CartItemModel.id.in_(line_ids),
            ),
        )
        return result.rowcount == len(line_ids)  # type: ignore

    async def _load_aggregate(self, model: CartModel) -> Cart:
        stmt = (
            select(CartItemModel, ProductModel)
            .join(ProductModel, ProductModel.id == CartItemModel.product_id)
            .where(CartItemModel.cart_id == model.id)
            .order_by(CartItemModel.created_at, CartItemModel.id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        items = [
            CartItem(
                product=map_product_to_domain(product_model),
                quantity=item_model.quantity,
                id=item_model.id,
            )
            for item_model, product_model in result.all()
        ]
        return Cart(
            id=model.id,
            user_id=model.user_id,
            items=items,
            created_at=model.created_at,
        )
