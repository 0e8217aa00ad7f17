from shopfront.domain.ordering.repositories.order_repository import OrderRepository

__all__ = ["OrderRepository"]
