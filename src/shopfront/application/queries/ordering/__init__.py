from shopfront.application.queries.ordering.order_queries import (
    AdminOrderView,
    GetOrderQuery,
    ListAllOrdersQuery,
    ListOrdersQuery,
)

__all__ = [
    "AdminOrderView",
    "GetOrderQuery",
    "ListAllOrdersQuery",
    "ListOrdersQuery",
]
