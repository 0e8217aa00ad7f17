"""Order repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from shopfront.domain.ordering.aggregates import Order


class OrderRepository(ABC):
    """Repository interface for Order aggregates."""

    @abstractmethod
    async def add(self, order: Order) -> None:
        """Insert a new order with its items."""

    @abstractmethod
    async def update_status(self, order: Order) -> None:
        """Persist the order's status (the only mutable field)."""

    @abstractmethod
    async def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order with its items."""

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> list[Order]:
        """List a user's orders, newest first."""

    @abstractmethod
    async def list_all(self) -> list[Order]:
        """List every order, newest first."""
