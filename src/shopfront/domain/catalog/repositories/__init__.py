from shopfront.domain.catalog.repositories.category_repository import (
    CategoryRepository,
)
from shopfront.domain.catalog.repositories.product_repository import (
    ProductRepository,
)

__all__ = ["CategoryRepository", "ProductRepository"]
