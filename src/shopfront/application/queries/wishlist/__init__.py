from shopfront.application.queries.wishlist.list_wishlist_query import (
    ListWishlistQuery,
)

__all__ = ["ListWishlistQuery"]
