from __future__ import annotations

from typing import TYPE_CHECKING

from shopfront.domain.wishlist import WishlistItem, WishlistRepository

if TYPE_CHECKING:
    from shopfront.application.context import UserContext
    from shopfront.application.factories import RepositoryFactory


class ListWishlistQuery:
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
    ) -> ListWishlistQuery:
        return cls(
            wishlist_repository=factory.wishlist_repository(),
            current_user=current_user,
        )

    async def execute(self) -> list[WishlistItem]:
        return await self._wishlist_repo.list_for_user(self._user_id)
