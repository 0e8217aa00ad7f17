"""Product entity."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional
from uuid import UUID, uuid4

from shopfront.domain.catalog.exceptions import InvalidPriceError, InvalidStockError
from shopfront.domain.catalog.value_objects import quantize_price
from shopfront.domain.shared.exceptions import ValidationError
from shopfront.domain.shared.time import utc_now


def _validate_price(price: Any) -> Decimal:
    try:
        value = Decimal(str(price))
    except (InvalidOperation, ValueError) as e:
        raise InvalidPriceError(price) from e
    if not value.is_finite() or value <= 0:
        raise InvalidPriceError(price)
    return quantize_price(value)


def _validate_stock(stock: Any) -> int:
    if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
        raise InvalidStockError(stock)
    return stock


def _validate_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        msg = "Product name is required"
        raise ValidationError(msg)
    return cleaned


class Product:
    """
    A sellable product.

    Stock is only changed here by admin edits. Order placement decrements
    stock through a guarded update in the repository, never through this
    entity.

    Only an edit that sets ``stock`` marks it as changed, so saving a price
    or name edit never writes back a stock value read earlier.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        price: Any,
        category_id: UUID,
        description: str = "",
        stock: int = 0,
        images: Optional[list[str]] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id or uuid4()
        self._name = _validate_name(name)
        self._description = description or ""
        self._price = _validate_price(price)
        self._stock = _validate_stock(stock)
        self._stock_changed = False
        self._category_id = category_id
        self._images = list(images or [])
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        name: str,
        description: str,
        price: Decimal,
        stock: int,
        category_id: UUID,
        images: list[str],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Product":
        return cls(
            id=id,
            name=name,
            description=description,
            price=price,
            stock=stock,
            category_id=category_id,
            images=images,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def stock(self) -> int:
        return self._stock

    @property
    def stock_changed(self) -> bool:
        return self._stock_changed

    @property
    def category_id(self) -> UUID:
        return self._category_id

    @property
    def images(self) -> list[str]:
        return list(self._images)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_stock_for(self, quantity: int) -> bool:
        return self._stock >= quantity

    def update(  # NOQA: PLR0913
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        price: Any = None,
        stock: Optional[int] = None,
        category_id: Optional[UUID] = None,
        images: Optional[list[str]] = None,
    ) -> None:
        """Apply a partial update. ``None`` leaves a field unchanged."""
        if name is not None:
            self._name = _validate_name(name)
        if description is not None:
            self._description = description
        if price is not None:
            self._price = _validate_price(price)
        if stock is not None:
            self._stock = _validate_stock(stock)
            self._stock_changed = True
        if category_id is not None:
            self._category_id = category_id
        if images is not None:
            self._images = list(images)
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Product(id={self._id}, name={self._name!r}, stock={self._stock})"
