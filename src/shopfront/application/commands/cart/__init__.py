from shopfront.application.commands.cart.add_cart_item_command import (
    AddCartItemCommand,
)
from shopfront.application.commands.cart.update_cart_item_command import (
    UpdateCartItemCommand,
)

__all__ = [
    "AddCartItemCommand",
    "UpdateCartItemCommand",
]
