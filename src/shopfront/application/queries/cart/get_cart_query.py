"""Get (or lazily create) the current user's cart."""

from __future__ import annotations

from typing import TYPE_CHECKING

from shopfront.domain.cart import Cart, CartRepository

if TYPE_CHECKING:
    from shopfront.application.context import UserContext
    from shopfront.application.factories import RepositoryFactory


class GetCartQuery:
    """Return the user's cart, creating an empty one on first access.

    Not strictly read-only: the first call inserts the cart row, so the
    caller commits afterwards.
    """

    def __init__(self, cart_repository: CartRepository, current_user: UserContext):
        self._cart_repo = cart_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        current_user: UserContext,
    ) -> GetCartQuery:
        return cls(
            cart_repository=factory.cart_repository(),
            current_user=current_user,
        )

    async def execute(self) -> Cart:
        return await self._cart_repo.get_or_create(self._user_id)
