"""SQLAlchemy repository implementations for catalog domain."""

from shopfront.infrastructure.persistence.sqlalchemy.repositories.catalog.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories.catalog.product_repository import (  # NOQA: E501
    ProductRepositorySQLAlchemy,
    map_product_to_domain,
)

__all__ = [
    "CategoryRepositorySQLAlchemy",
    "ProductRepositorySQLAlchemy",
    "map_product_to_domain",
]
