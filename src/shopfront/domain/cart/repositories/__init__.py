from shopfront.domain.cart.repositories.cart_repository import CartRepository

__all__ = ["CartRepository"]
