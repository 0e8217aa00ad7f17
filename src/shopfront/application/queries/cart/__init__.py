from shopfront.application.queries.cart.get_cart_query import GetCartQuery

__all__ = ["GetCartQuery"]
