from shopfront.domain.catalog.entities.category import Category
from shopfront.domain.catalog.entities.product import Product

__all__ = ["Category", "Product"]
