from shopfront.domain.wishlist.repositories.wishlist_repository import (
    WishlistRepository,
)

__all__ = ["WishlistRepository"]
