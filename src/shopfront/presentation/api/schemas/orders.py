"""Order schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from shopfront.application.queries.ordering import AdminOrderView
from shopfront.domain.ordering import Order, OrderItem, OrderStatus


class OrderItemResponse(BaseModel):
    id: UUID
    product_id: UUID
    product_name: str
    quantity: int
    price: Decimal = Field(..., description="Unit price at the time of the order")
    line_total: Decimal

    @classmethod
    def from_entity(cls, item: OrderItem) -> "OrderItemResponse":
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            quantity=item.quantity,
            price=item.price,
            line_total=item.line_total,
        )


class CustomerSummary(BaseModel):
    id: UUID
    email: str
    name: str


class OrderResponse(BaseModel):
    id: UUID
    user_id: UUID
    status: str
    total: Decimal
    items: list[OrderItemResponse]
    created_at: datetime
    updated_at: datetime
    customer: Optional[CustomerSummary] = None

    @classmethod
    def from_entity(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            user_id=order.user_id,
            status=order.status.value,
            total=order.total,
            items=[OrderItemResponse.from_entity(i) for i in order.items],
            created_at=order.created_at,
            updated_at=order.updated_at,
        )

    @classmethod
    def from_admin_view(cls, view: AdminOrderView) -> "OrderResponse":
        response = cls.from_entity(view.order)
        if view.customer is not None:
            response.customer = CustomerSummary(
                id=view.customer.id,
                email=view.customer.email,
                name=view.customer.name,
            )
        return response


class UpdateOrderStatusRequest(BaseModel):
    """Target status. Unknown values are rejected with a 400."""

    status: str = Field(
        ...,
        description=f"One of {', '.join(s.value for s in OrderStatus)}",
    )
