"""Add a product to the current user's cart."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from shopfront.domain.cart import Cart, CartRepository, InvalidQuantityError
from shopfront.domain.catalog import ProductNotFoundError, ProductRepository

if TYPE_CHECKING:
    from shopfront.application.context import UserContext
    from shopfront.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class AddCartItemCommand:
    """Upsert a cart line; quantities accumulate onto an existing line."""

    def __init__(
        self,
        cart_repository: CartRepository,
        product_repository: ProductRepository,
        current_user: UserContext,
    ):
        self._cart_repo = cart_repository
        self._product_repo = product_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        current_user: UserContext,
    ) -> AddCartItemCommand:
        return cls(
            cart_repository=factory.cart_repository(),
            product_repository=factory.product_repository(),
            current_user=current_user,
        )

    async def execute(self, product_id: UUID, quantity: int) -> Cart:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidQuantityError(quantity)

        product = await self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        cart = await self._cart_repo.get_or_create(self._user_id)
        cart.add_item(product, quantity)
        await self._cart_repo.save(cart)

        logger.debug(
            "Added %d x %s to cart of user %s",
            quantity,
            product_id,
            self._user_id,
        )
        return cart
