from shopfront.application.commands.wishlist.wishlist_commands import (
    AddWishlistItemCommand,
    RemoveWishlistItemCommand,
)

__all__ = [
    "AddWishlistItemCommand",
    "RemoveWishlistItemCommand",
]
