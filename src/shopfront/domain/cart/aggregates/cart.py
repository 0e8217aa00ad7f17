"""Cart aggregate: one cart per user holding product line items."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from shopfront.domain.cart.exceptions import CartItemNotFoundError, InvalidQuantityError
from shopfront.domain.catalog import InsufficientStockError, Product
from shopfront.domain.catalog.value_objects import quantize_price
from shopfront.domain.shared.time import utc_now


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class CartItem:
    """A (product, quantity) line. The product is the live catalog entry."""

    def __init__(
        self,
        product: Product,
        quantity: int,
        id: Optional[UUID] = None,
    ):
        if not _is_int(quantity) or quantity < 1:
            raise InvalidQuantityError(quantity)
        self._id = id or uuid4()
        self._product = product
        self._quantity = quantity

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def product(self) -> Product:
        return self._product

    @property
    def product_id(self) -> UUID:
        return self._product.id

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def line_total(self) -> Decimal:
        return quantize_price(self._product.price * self._quantity)

    def __repr__(self) -> str:
        return f"CartItem(product_id={self.product_id}, quantity={self._quantity})"


class Cart:
    """
    Cart aggregate root.

    Invariants:
    - at most one line item per product
    - every line item has quantity >= 1; setting 0 removes the line

    Stock is only read here to validate requests. It is never reserved
    until the order is placed.
    """

    def __init__(
        self,
        user_id: UUID,
        items: Optional[list[CartItem]] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._items: dict[UUID, CartItem] = {}
        for item in items or []:
            self._items[item.product_id] = item
        self._created_at = created_at or utc_now()

    @classmethod
    def create(cls, user_id: UUID) -> "Cart":
        return cls(user_id=user_id)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def items(self) -> list[CartItem]:
        return list(self._items.values())

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items.values())

    @property
    def subtotal(self) -> Decimal:
        """Sum of live price x quantity. Never frozen, unlike order totals."""
        total = sum(
            (item.product.price * item.quantity for item in self._items.values()),
            Decimal("0"),
        )
        return quantize_price(total)

    def get_item(self, product_id: UUID) -> Optional[CartItem]:
        return self._items.get(product_id)

    def add_item(self, product: Product, quantity: int) -> CartItem:
        """Add ``quantity`` units of ``product``, accumulating onto any line.

        Raises
        ------
        InvalidQuantityError
            If quantity is not an integer >= 1
        InsufficientStockError
            If the accumulated quantity exceeds the product's live stock
        """
        if not _is_int(quantity) or quantity < 1:
            raise InvalidQuantityError(quantity)

        existing = self._items.get(product.id)
        new_quantity = quantity + (existing.quantity if existing else 0)
        if not product.has_stock_for(new_quantity):
            raise InsufficientStockError(
                product.name,
                requested=new_quantity,
                available=product.stock,
                product_id=product.id,
            )

        item = CartItem(
            product=product,
            quantity=new_quantity,
            id=existing.id if existing else None,
        )
        self._items[product.id] = item
        return item

    def set_item_quantity(
        self,
        product_id: UUID,
        quantity: int,
        product: Optional[Product] = None,
    ) -> Optional[CartItem]:
        """Overwrite a line's quantity; 0 removes the line.

        Parameters
        ----------
        product_id
            Product whose line item is changed
        quantity
            New quantity; 0 removes the line (no error if absent)
        product
            Freshly loaded product for the stock check (defaults to the
            product already attached to the line)

        Returns
        -------
        The updated line item, or None if it was removed

        Raises
        ------
        InvalidQuantityError
            If quantity is negative or not an integer
        CartItemNotFoundError
            If quantity > 0 and the cart has no line for the product
        InsufficientStockError
            If quantity exceeds the product's live stock
        """
        if not _is_int(quantity) or quantity < 0:
            raise InvalidQuantityError(quantity, minimum=0)

        if quantity == 0:
            self._items.pop(product_id, None)
            return None

        existing = self._items.get(product_id)
        if existing is None:
            raise CartItemNotFoundError(product_id)

        live_product = product or existing.product
        if not live_product.has_stock_for(quantity):
            raise InsufficientStockError(
                live_product.name,
                requested=quantity,
                available=live_product.stock,
                product_id=product_id,
            )

        item = CartItem(product=live_product, quantity=quantity, id=existing.id)
        self._items[product_id] = item
        return item

    def clear(self) -> None:
        self._items.clear()

    def __repr__(self) -> str:
        return f"Cart(id={self._id}, user_id={self._user_id}, items={len(self._items)})"
