"""Cart domain exceptions."""

from typing import Any
from uuid import UUID

from shopfront.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidQuantityError(ValidationError):
    """Raised when a cart quantity is out of range."""

    def __init__(self, quantity: Any, minimum: int = 1) -> None:
        super().__init__(
            message=f"Quantity must be at least {minimum}",
            code=ErrorCode.INVALID_QUANTITY,
            details={"quantity": quantity, "minimum": minimum},
        )


class CartItemNotFoundError(EntityNotFoundError):
    """Raised when the cart holds no line item for a product."""

    def __init__(self, product_id: UUID) -> None:
        super().__init__(
            message="Cart item not found",
            code=ErrorCode.CART_ITEM_NOT_FOUND,
            details={"product_id": str(product_id)},
        )
