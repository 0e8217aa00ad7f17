from shopfront.infrastructure.persistence.sqlalchemy.models.ordering.order_model import (  # NOQA: E501
    OrderItemModel,
    OrderModel,
)

__all__ = ["OrderItemModel", "OrderModel"]
