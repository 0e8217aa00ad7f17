"""Catalog domain: products, categories and their images."""

from shopfront.domain.catalog.entities import Category, Product
from shopfront.domain.catalog.exceptions import (
    CategoryAlreadyExistsError,
    CategoryInUseError,
    CategoryNotFoundError,
    InsufficientStockError,
    InvalidPriceError,
    InvalidStockError,
    ProductInUseError,
    ProductNotFoundError,
)
from shopfront.domain.catalog.repositories import (
    CategoryRepository,
    ProductRepository,
)
from shopfront.domain.catalog.value_objects import Slug

__all__ = [
    "Category",
    "CategoryAlreadyExistsError",
    "CategoryInUseError",
    "CategoryNotFoundError",
    "CategoryRepository",
    "InsufficientStockError",
    "InvalidPriceError",
    "InvalidStockError",
    "Product",
    "ProductInUseError",
    "ProductNotFoundError",
    "ProductRepository",
    "Slug",
]
