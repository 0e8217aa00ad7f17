"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from shopfront.domain.cart import CartRepository
from shopfront.domain.catalog import CategoryRepository, ProductRepository
from shopfront.domain.ordering import OrderRepository
from shopfront.domain.user import UserRepository
from shopfront.domain.wishlist import WishlistRepository
from shopfront_auth.repositories import (
    RefreshTokenRepository,
    UserCredentialRepository,
)


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        ...

    def credential_repository(self) -> UserCredentialRepository:
        ...

    def refresh_token_repository(self) -> RefreshTokenRepository:
        ...

    def product_repository(self) -> ProductRepository:
        ...

    def category_repository(self) -> CategoryRepository:
        ...

    def cart_repository(self) -> CartRepository:
        ...

    def order_repository(self) -> OrderRepository:
        ...

    def wishlist_repository(self) -> WishlistRepository:
        ...
