"""Order read use cases for customers and administrators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from shopfront.domain.ordering import (
    Order,
    OrderAccessDeniedError,
    OrderNotFoundError,
    OrderRepository,
)
from shopfront.domain.user import User, UserRepository

if TYPE_CHECKING:
    from shopfront.application.context import UserContext
    from shopfront.application.factories import RepositoryFactory


@dataclass(frozen=True)
class AdminOrderView:
    """An order together with the customer who placed it."""

    order: Order
    customer: Optional[User]


class ListOrdersQuery:
    """List the current user's own orders, newest first."""

    def __init__(self, order_repository: OrderRepository, current_user: UserContext):
        self._order_repo = order_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        current_user: UserContext,
    ) -> ListOrdersQuery:
        return cls(
            order_repository=factory.order_repository(),
            current_user=current_user,
        )

    async def execute(self) -> list[Order]:
        return await self._order_repo.list_for_user(self._user_id)


class GetOrderQuery:
    """
    Get a single order.

    Customers may only read their own orders; asking for another
    customer's order is refused with a 403, not hidden as a 404.
    Administrators may read any order.
    """

    def __init__(self, order_repository: OrderRepository, current_user: UserContext):
        self._order_repo = order_repository
        self._current_user = current_user

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        current_user: UserContext,
    ) -> GetOrderQuery:
        return cls(
            order_repository=factory.order_repository(),
            current_user=current_user,
        )

    async def execute(self, order_id: UUID) -> Order:
        order = await self._order_repo.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        if not self._current_user.is_admin and not order.is_owned_by(
            self._current_user.user_id,
        ):
            raise OrderAccessDeniedError(order_id)
        return order


class ListAllOrdersQuery:
    """List every order with its customer (admin)."""

    def __init__(
        self,
        order_repository: OrderRepository,
        user_repository: UserRepository,
    ):
        self._order_repo = order_repository
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListAllOrdersQuery:
        return cls(
            order_repository=factory.order_repository(),
            user_repository=factory.user_repository(),
        )

    async def execute(self) -> list[AdminOrderView]:
        orders = await self._order_repo.list_all()
        users = await self._user_repo.find_by_ids(
            list({order.user_id for order in orders}),
        )
        return [
            AdminOrderView(order=order, customer=users.get(order.user_id))
            for order in orders
        ]
