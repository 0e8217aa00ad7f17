"""Order aggregate: an immutable snapshot of a checked-out cart."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from shopfront.domain.cart import Cart
from shopfront.domain.catalog.value_objects import quantize_price
from shopfront.domain.ordering.exceptions import (
    EmptyCartError,
    InvalidStatusTransitionError,
)
from shopfront.domain.ordering.value_objects import OrderStatus
from shopfront.domain.shared.time import utc_now


@dataclass(frozen=True)
class OrderItem:
    """A line of an order. The price is copied, not a live reference."""

    product_id: UUID
    product_name: str
    quantity: int
    price: Decimal
    id: UUID = field(default_factory=uuid4)

    @property
    def line_total(self) -> Decimal:
        return quantize_price(self.price * self.quantity)


class Order:
    """
    Order aggregate root.

    Items and total are fixed at creation. Only the status may change,
    along the transitions defined by OrderStatus.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        items: list[OrderItem],
        total: Decimal,
        status: OrderStatus = OrderStatus.PENDING,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._items = tuple(items)
        self._total = quantize_price(total)
        self._status = status
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @classmethod
    def place_from_cart(cls, cart: Cart) -> "Order":
        """Snapshot the cart into a new PENDING order at current prices.

        Raises
        ------
        EmptyCartError
            If the cart has no items
        """
        if cart.is_empty:
            raise EmptyCartError

        items = [
            OrderItem(
                product_id=line.product_id,
                product_name=line.product.name,
                quantity=line.quantity,
                price=line.product.price,
            )
            for line in cart.items
        ]
        total = sum((item.price * item.quantity for item in items), Decimal("0"))
        return cls(user_id=cart.user_id, items=items, total=total)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        items: list[OrderItem],
        total: Decimal,
        status: OrderStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Order":
        return cls(
            id=id,
            user_id=user_id,
            items=items,
            total=total,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def items(self) -> list[OrderItem]:
        return list(self._items)

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: UUID) -> bool:
        return self._user_id == user_id

    def change_status(self, target: OrderStatus) -> bool:
        """Move to ``target``.

        Returns
        -------
        True if the status changed, False if it already was ``target``

        Raises
        ------
        InvalidStatusTransitionError
            If the lifecycle does not allow the transition
        """
        if target == self._status:
            return False
        if not self._status.can_transition_to(target):
            raise InvalidStatusTransitionError(self._status.value, target.value)
        self._status = target
        self._updated_at = utc_now()
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Order(id={self._id}, status={self._status.value}, "
            f"total={self._total})"
        )
