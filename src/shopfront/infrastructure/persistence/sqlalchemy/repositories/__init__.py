"""SQLAlchemy repository implementations organized by bounded context."""

from shopfront.infrastructure.persistence.sqlalchemy.repositories.cart import (
    CartRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.catalog import (
    CategoryRepositorySQLAlchemy,
    ProductRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.ordering import (
    OrderRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.wishlist import (
    WishlistRepositorySQLAlchemy,
)

__all__ = [
    # Factory (recommended for creating repositories)
    "SQLAlchemyRepositoryFactory",
    "CartRepositorySQLAlchemy",
    "CategoryRepositorySQLAlchemy",
    "OrderRepositorySQLAlchemy",
    "ProductRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "WishlistRepositorySQLAlchemy",
]
