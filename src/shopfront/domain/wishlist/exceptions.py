from uuid import UUID

from shopfront.domain.shared.exceptions import ConflictError, ErrorCode


class WishlistItemAlreadyExistsError(ConflictError):
    """Raised when a product is already on the user's wishlist."""

    def __init__(self, product_id: UUID) -> None:
        super().__init__(
            message="Product already in wishlist",
            code=ErrorCode.DUPLICATE_WISHLIST_ITEM,
            details={"product_id": str(product_id)},
        )
