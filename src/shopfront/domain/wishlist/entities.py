"""Wishlist entry entity."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from shopfront.domain.catalog import Product
from shopfront.domain.shared.time import utc_now


class WishlistItem:
    """A product a user has saved for later."""

    def __init__(
        self,
        user_id: UUID,
        product: Product,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._product = product
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def product(self) -> Product:
        return self._product

    @property
    def product_id(self) -> UUID:
        return self._product.id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def __repr__(self) -> str:
        return f"WishlistItem(user_id={self._user_id}, product_id={self.product_id})"
