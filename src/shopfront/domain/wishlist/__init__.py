"""Wishlist domain: products a user saved for later."""

from shopfront.domain.wishlist.entities import WishlistItem
from shopfront.domain.wishlist.exceptions import WishlistItemAlreadyExistsError
from shopfront.domain.wishlist.repositories import WishlistRepository

__all__ = [
    "WishlistItem",
    "WishlistItemAlreadyExistsError",
    "WishlistRepository",
]
