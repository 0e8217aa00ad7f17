"""SQLAlchemy repository factory for the request's unit of work."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.infrastructure.persistence.sqlalchemy.repositories.cart import (
    CartRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.catalog import (
    CategoryRepositorySQLAlchemy,
    ProductRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.ordering import (
    OrderRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.wishlist import (
    WishlistRepositorySQLAlchemy,
)
from shopfront_auth.persistence.sqlalchemy import (
    RefreshTokenRepositorySQLAlchemy,
    UserCredentialRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    Every repository shares the one session, so everything a command does
    commits or rolls back together.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._product_repo: ProductRepositorySQLAlchemy | None = None
        self._cart_repo: CartRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        return UserRepositorySQLAlchemy(self._session)

    def credential_repository(self) -> UserCredentialRepositorySQLAlchemy:
        return UserCredentialRepositorySQLAlchemy(self._session)

    def refresh_token_repository(self) -> RefreshTokenRepositorySQLAlchemy:
        return RefreshTokenRepositorySQLAlchemy(self._session)

    def product_repository(self) -> ProductRepositorySQLAlchemy:
        if self._product_repo is None:
            self._product_repo = ProductRepositorySQLAlchemy(self._session)
        return self._product_repo

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        return CategoryRepositorySQLAlchemy(self._session)

    def cart_repository(self) -> CartRepositorySQLAlchemy:
        if self._cart_repo is None:
            self._cart_repo = CartRepositorySQLAlchemy(self._session)
        return self._cart_repo

    def order_repository(self) -> OrderRepositorySQLAlchemy:
        return OrderRepositorySQLAlchemy(self._session)

    def wishlist_repository(self) -> WishlistRepositorySQLAlchemy:
        return WishlistRepositorySQLAlchemy(self._session)
