from shopfront.infrastructure.persistence.sqlalchemy.models.wishlist.wishlist_item_model import (  # NOQA: E501
    WishlistItemModel,
)

__all__ = ["WishlistItemModel"]
