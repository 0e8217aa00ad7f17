"""SQLAlchemy models for persistence layer."""

from shopfront.infrastructure.persistence.sqlalchemy.models.base import Base
from shopfront.infrastructure.persistence.sqlalchemy.models.cart import (
    CartItemModel,
    CartModel,
)
from shopfront.infrastructure.persistence.sqlalchemy.models.catalog import (
    CategoryModel,
    ProductImageModel,
    ProductModel,
)
from shopfront.infrastructure.persistence.sqlalchemy.models.ordering import (
    OrderItemModel,
    OrderModel,
)
from shopfront.infrastructure.persistence.sqlalchemy.models.user import UserModel
from shopfront.infrastructure.persistence.sqlalchemy.models.wishlist import (
    WishlistItemModel,
)

__all__ = [
    "Base",
    "CartItemModel",
    "CartModel",
    "CategoryModel",
    "OrderItemModel",
    "OrderModel",
    "ProductImageModel",
    "ProductModel",
    "UserModel",
    "WishlistItemModel",
]
