"""Place an order from the current user's cart."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shopfront.domain.cart import CartRepository
from shopfront.domain.catalog import InsufficientStockError, ProductRepository
from shopfront.domain.ordering import EmptyCartError, Order, OrderRepository

if TYPE_CHECKING:
    from shopfront.application.context import UserContext
    from shopfront.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class PlaceOrderCommand:
    """
    Convert the cart into an immutable PENDING order.

    All writes go through the caller's session and become durable only
    when the caller commits. Any exception raised here must be followed
    by a rollback, which leaves no order row, no stock change and the
    cart untouched.

    The cart lines are claimed with a delete that must hit every line that
    was read, so two checkouts of the same cart cannot both succeed. Stock
    is taken with a guarded decrement per line, so two concurrent checkouts
    can never both take the last unit.
    """

    def __init__(
        self,
        cart_repository: CartRepository,
        product_repository: ProductRepository,
        order_repository: OrderRepository,
        current_user: UserContext,
    ):
        self._cart_repo = cart_repository
        self._product_repo = product_repository
        self._order_repo = order_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        current_user: UserContext,
    ) -> PlaceOrderCommand:
        return cls(
            cart_repository=factory.cart_repository(),
            product_repository=factory.product_repository(),
            order_repository=factory.order_repository(),
            current_user=current_user,
        )

    async def execute(self) -> Order:
        """
        Place the order.

        Returns
        -------
        The created order with its items

        Raises
        ------
        EmptyCartError
            If the user has no cart or the cart has no items, or a
            concurrent checkout already converted the same lines
        InsufficientStockError
            If any line exceeds the product's stock, either at the
            pre-check or at the guarded decrement
        """
        cart = await self._cart_repo.find_by_user_id(self._user_id)
        if cart is None or cart.is_empty:
            raise EmptyCartError

        # Fail early with the product name before writing anything
        for line in cart.items:
            if not line.product.has_stock_for(line.quantity):
                raise InsufficientStockError(
                    line.product.name,
                    requested=line.quantity,
                    available=line.product.stock,
                    product_id=line.product_id,
                )

        order = Order.place_from_cart(cart)

        if not await self._cart_repo.remove_items(cart):
            logger.warning(
                "Cart of user %s was checked out concurrently",
                self._user_id,
            )
            raise EmptyCartError

        for line in cart.items:
            taken = await self._product_repo.decrement_stock(
                line.product_id,
                line.quantity,
            )
            if not taken:
                logger.warning(
                    "Stock for product %s ran out during checkout of user %s",
                    line.product_id,
                    self._user_id,
                )
                raise InsufficientStockError(
                    line.product.name,
                    requested=line.quantity,
                    product_id=line.product_id,
                )

        await self._order_repo.add(order)
        cart.clear()

        logger.info(
            "Order %s placed by user %s: %d items, total %s",
            order.id,
            self._user_id,
            len(order.items),
            order.total,
        )
        return order
