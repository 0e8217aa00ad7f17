"""Ordering domain: immutable orders and their status lifecycle."""

from shopfront.domain.ordering.aggregates import Order, OrderItem
from shopfront.domain.ordering.exceptions import (
    EmptyCartError,
    InvalidOrderStatusError,
    InvalidStatusTransitionError,
    OrderAccessDeniedError,
    OrderNotFoundError,
)
from shopfront.domain.ordering.repositories import OrderRepository
from shopfront.domain.ordering.value_objects import OrderStatus

__all__ = [
    "EmptyCartError",
    "InvalidOrderStatusError",
    "InvalidStatusTransitionError",
    "Order",
    "OrderAccessDeniedError",
    "OrderItem",
    "OrderNotFoundError",
    "OrderRepository",
    "OrderStatus",
]
