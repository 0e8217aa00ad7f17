"""Commands for the current user's wishlist."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from shopfront.domain.catalog import ProductNotFoundError, ProductRepository
from shopfront.domain.wishlist import (
    WishlistItem,
    WishlistItemAlreadyExistsError,
    WishlistRepository,
)

if TYPE_CHECKING:
    from shopfront.application.context import UserContext
    from shopfront.application.factories import RepositoryFactory


class AddWishlistItemCommand:
    def __init__(
        self,
        wishlist_repository: WishlistRepository,
        product_repository: ProductRepository,
        current_user: UserContext,
    ):
        self._wishlist_repo = wishlist_repository
        self._product_repo = product_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        current_user: UserContext,
    ) -> AddWishlistItemCommand:
        return cls(
            wishlist_repository=factory.wishlist_repository(),
            product_repository=factory.product_repository(),
            current_user=current_user,
        )

    async def execute(self, product_id: UUID) -> WishlistItem:
        product = await self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        if await self._wishlist_repo.exists(self._user_id, product_id):
            raise WishlistItemAlreadyExistsError(product_id)

        item = WishlistItem(user_id=self._user_id, product=product)
        await self._wishlist_repo.add(item)
        return item


class RemoveWishlistItemCommand:
    """Remove a product from the wishlist. Removing an absent entry is fine."""

    def __init__(
        self,
        wishlist_repository: WishlistRepository,
        current_user: UserContext,
    ):
        self._wishlist_repo = wishlist_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        current_user: UserContext,
    ) -> RemoveWishlistItemCommand:
        return cls(
            wishlist_repository=factory.wishlist_repository(),
            current_user=current_user,
        )

    async def execute(self, product_id: UUID) -> bool:
        return await self._wishlist_repo.remove(self._user_id, product_id)
