from shopfront.domain.ordering.value_objects.order_status import OrderStatus

__all__ = ["OrderStatus"]
