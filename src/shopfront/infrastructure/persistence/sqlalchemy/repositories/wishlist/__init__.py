"""SQLAlchemy repository implementations for wishlist domain."""

from shopfront.infrastructure.persistence.sqlalchemy.repositories.wishlist.wishlist_repository import (  # NOQA: E501
    WishlistRepositorySQLAlchemy,
)

__all__ = ["WishlistRepositorySQLAlchemy"]
