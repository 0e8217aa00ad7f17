"""Overwrite the quantity of a cart line."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from shopfront.domain.cart import Cart, CartRepository
from shopfront.domain.catalog import ProductRepository

if TYPE_CHECKING:
    from shopfront.application.context import UserContext
    from shopfront.application.factories import RepositoryFactory


class UpdateCartItemCommand:
    """Set a line's quantity. Zero removes the line, even if it is absent."""

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
    ) -> UpdateCartItemCommand:
        return cls(
            cart_repository=factory.cart_repository(),
            product_repository=factory.product_repository(),
            current_user=current_user,
        )

    async def execute(self, product_id: UUID, quantity: int) -> Cart:
        cart = await self._cart_repo.get_or_create(self._user_id)

        # Re-read the product so the stock check sees the live value
        product = None
        if isinstance(quantity, int) and quantity > 0:
            product = await self._product_repo.find_by_id(product_id)

        cart.set_item_quantity(product_id, quantity, product=product)
        await self._cart_repo.save(cart)
        return cart
