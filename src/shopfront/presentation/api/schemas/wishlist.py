"""Wishlist schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from shopfront.domain.wishlist import WishlistItem
from shopfront.presentation.api.schemas.catalog import ProductResponse


class WishlistItemResponse(BaseModel):
    id: UUID
    product_id: UUID
    created_at: datetime
    product: ProductResponse

    @classmethod
    def from_entity(cls, item: WishlistItem) -> "WishlistItemResponse":
        return cls(
            id=item.id,
            product_id=item.product_id,
            created_at=item.created_at,
            product=ProductResponse.from_entity(item.product),
        )


class AddWishlistItemRequest(BaseModel):
    product_id: UUID
