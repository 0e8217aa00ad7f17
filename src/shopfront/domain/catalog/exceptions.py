"""Catalog domain exceptions."""

from typing import Any
from uuid import UUID

from shopfront.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product cannot be found."""

    def __init__(self, product_id: UUID | str) -> None:
        super().__init__(
            message="Product not found",
            code=ErrorCode.PRODUCT_NOT_FOUND,
            details={"product_id": str(product_id)},
        )


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category cannot be found."""

    def __init__(self, category_id: UUID | str) -> None:
        super().__init__(
            message="Category not found",
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={"category_id": str(category_id)},
        )


class CategoryAlreadyExistsError(ConflictError):
    """Raised when a category name (or its slug) is already taken."""

    def __init__(self, name: str, slug: str | None = None) -> None:
        super().__init__(
            message=f"Category '{name}' already exists",
            code=ErrorCode.DUPLICATE_CATEGORY,
            details={"name": name, "slug": slug},
        )


class CategoryInUseError(ConflictError):
    """Raised when deleting a category that still has products."""

    def __init__(self, category_id: UUID, product_count: int) -> None:
        super().__init__(
            message="Cannot delete category with existing products",
            code=ErrorCode.CATEGORY_IN_USE,
            details={
                "category_id": str(category_id),
                "product_count": product_count,
            },
        )


class ProductInUseError(ConflictError):
    """Raised when deleting a product that appears in any order."""

    def __init__(self, product_id: UUID) -> None:
        super().__init__(
            message="Cannot delete product that is referenced by existing orders",
            code=ErrorCode.PRODUCT_IN_USE,
            details={"product_id": str(product_id)},
        )


class InvalidPriceError(ValidationError):
    """Raised when a price is not a positive amount."""

    def __init__(self, price: Any) -> None:
        super().__init__(
            message="Price must be greater than 0",
            code=ErrorCode.INVALID_PRICE,
            details={"price": str(price)},
        )


class InvalidStockError(ValidationError):
    """Raised when a stock level is negative or not an integer."""

    def __init__(self, stock: Any) -> None:
        super().__init__(
            message="Stock must be a non-negative integer",
            code=ErrorCode.INVALID_STOCK,
            details={"stock": str(stock)},
        )


class InsufficientStockError(BusinessRuleViolation):
    """Raised when a requested quantity exceeds the available stock."""

    def __init__(
        self,
        product_name: str,
        requested: int | None = None,
        available: int | None = None,
        product_id: UUID | None = None,
    ) -> None:
        self.product_name = product_name
        super().__init__(
            message=f"Insufficient stock for {product_name}",
            code=ErrorCode.INSUFFICIENT_STOCK,
            details={
                "product_id": str(product_id) if product_id else None,
                "requested": requested,
                "available": available,
            },
        )
