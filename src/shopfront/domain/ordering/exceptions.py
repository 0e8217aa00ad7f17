"""Ordering domain exceptions."""

from uuid import UUID

from shopfront.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order cannot be found."""

    def __init__(self, order_id: UUID | str) -> None:
        super().__init__(
            message="Order not found",
            code=ErrorCode.ORDER_NOT_FOUND,
            details={"order_id": str(order_id)},
        )


class OrderAccessDeniedError(ForbiddenError):
    """Raised when a customer asks for someone else's order."""

    def __init__(self, order_id: UUID) -> None:
        super().__init__(
            message="You do not have access to this order",
            details={"order_id": str(order_id)},
        )


class EmptyCartError(BusinessRuleViolation):
    """Raised when placing an order from an absent or empty cart."""

    def __init__(self) -> None:
        super().__init__(message="Cart is empty", code=ErrorCode.EMPTY_CART)


class InvalidOrderStatusError(ValidationError):
    """Raised for a status value outside the known set."""

    def __init__(self, value: object, valid: list[str]) -> None:
        super().__init__(
            message=f"Invalid status '{value}'. Valid statuses: {', '.join(valid)}",
            code=ErrorCode.INVALID_ORDER_STATUS,
            details={"status": str(value), "valid_statuses": valid},
        )


class InvalidStatusTransitionError(ConflictError):
    """Raised when the lifecycle does not allow the requested transition."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(
            message=f"Cannot change order status from {current} to {target}",
            code=ErrorCode.INVALID_STATUS_TRANSITION,
            details={"current": current, "target": target},
        )
