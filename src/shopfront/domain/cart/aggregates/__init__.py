from shopfront.domain.cart.aggregates.cart import Cart, CartItem

__all__ = ["Cart", "CartItem"]
