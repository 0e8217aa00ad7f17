"""Change the status of an order (admin)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from shopfront.domain.ordering import (
    Order,
    OrderNotFoundError,
    OrderRepository,
    OrderStatus,
)

if TYPE_CHECKING:
    from shopfront.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateOrderStatusCommand:
    """Move an order along its lifecycle. Same-status updates are no-ops."""

    def __init__(self, order_repository: OrderRepository):
        self._order_repo = order_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateOrderStatusCommand:
        return cls(order_repository=factory.order_repository())

    async def execute(self, order_id: UUID, status: str) -> Order:
        target = OrderStatus.parse(status)

        order = await self._order_repo.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        previous = order.status
        if order.change_status(target):
            await self._order_repo.update_status(order)
            logger.info(
                "Order %s status changed: %s -> %s",
                order.id,
                previous.value,
                target.value,
            )
        return order
