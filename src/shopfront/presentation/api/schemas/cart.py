"""Cart schemas."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from shopfront.domain.cart import Cart, CartItem
from shopfront.presentation.api.schemas.catalog import ProductResponse


class CartItemResponse(BaseModel):
    id: UUID
    product_id: UUID
    quantity: int
    line_total: Decimal
    product: ProductResponse

    @classmethod
    def from_entity(cls, item: CartItem) -> "CartItemResponse":
        return cls(
            id=item.id,
            product_id=item.product_id,
            quantity=item.quantity,
            line_total=item.line_total,
            product=ProductResponse.from_entity(item.product),
        )


class CartResponse(BaseModel):
    """The cart with its subtotal computed from live prices."""

    id: UUID
    user_id: UUID
    items: list[CartItemResponse]
    item_count: int
    subtotal: Decimal

    @classmethod
    def from_entity(cls, cart: Cart) -> "CartResponse":
        return cls(
            id=cart.id,
            user_id=cart.user_id,
            items=[CartItemResponse.from_entity(i) for i in cart.items],
            item_count=cart.item_count,
            subtotal=cart.subtotal,
        )


class AddCartItemRequest(BaseModel):
    product_id: UUID
    quantity: int = Field(1, ge=1, description="Units to add (accumulates)")


class UpdateCartItemRequest(BaseModel):
    product_id: UUID
    quantity: int = Field(..., ge=0, description="New quantity; 0 removes the line")
