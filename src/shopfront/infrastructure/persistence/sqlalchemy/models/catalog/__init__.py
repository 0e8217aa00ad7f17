from shopfront.infrastructure.persistence.sqlalchemy.models.catalog.category_model import (  # NOQA: E501
    CategoryModel,
)
from shopfront.infrastructure.persistence.sqlalchemy.models.catalog.product_model import (  # NOQA: E501
    ProductImageModel,
    ProductModel,
)

__all__ = ["CategoryModel", "ProductImageModel", "ProductModel"]
