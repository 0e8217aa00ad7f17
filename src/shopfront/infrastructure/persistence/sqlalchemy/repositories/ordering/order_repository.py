"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.domain.ordering import (
    Order,
    OrderItem,
    OrderNotFoundError,
    OrderRepository,
    OrderStatus,
)
from shopfront.infrastructure.persistence.sqlalchemy.models import (
    OrderItemModel,
    OrderModel,
)

logger = logging.getLogger(__name__)


class OrderRepositorySQLAlchemy(OrderRepository):
    """SQLAlchemy implementation of the OrderRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, order: Order) -> None:
        model = OrderModel(
            id=order.id,
            user_id=order.user_id,
            total=order.total,
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=[
                OrderItemModel(
                    id=item.id,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in order.items
            ],
        )
        self._session.add(model)
        await self._session.flush()
        logger.debug("Inserted order %s with %d items", order.id, len(order.items))

    async def update_status(self, order: Order) -> None:
        model = await self._find_model_by_id(order.id)
        if model is None:
            raise OrderNotFoundError(order.id)
        model.status = order.status.value
        model.updated_at = order.updated_at
        await self._session.flush()

    async def find_by_id(self, order_id: UUID) -> Optional[Order]:
        model = await self._find_model_by_id(order_id)
        return self._map_to_domain(model) if model else None

    async def list_for_user(self, user_id: UUID) -> list[Order]:
        stmt = (
            select(OrderModel)
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars()]

    async def list_all(self) -> list[Order]:
        stmt = select(OrderModel).order_by(OrderModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars()]

    async def _find_model_by_id(self, order_id: UUID) -> OrderModel | None:
        stmt = select(OrderModel).where(OrderModel.id == order_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: OrderModel) -> Order:
        return Order.reconstitute(
            id=model.id,
            user_id=model.user_id,
            items=[
                OrderItem(
                    id=item.id,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in model.items
            ],
            total=model.total,
            status=OrderStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
