"""Cart domain: one cart per user, line items and subtotal."""

from shopfront.domain.cart.aggregates import Cart, CartItem
from shopfront.domain.cart.exceptions import CartItemNotFoundError, InvalidQuantityError
from shopfront.domain.cart.repositories import CartRepository

__all__ = [
    "Cart",
    "CartItem",
    "CartItemNotFoundError",
    "CartRepository",
    "InvalidQuantityError",
]
