from shopfront.application.commands.catalog.category_commands import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from shopfront.application.commands.catalog.product_commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)

__all__ = [
    "CreateCategoryCommand",
    "CreateProductCommand",
    "DeleteCategoryCommand",
    "DeleteProductCommand",
    "UpdateCategoryCommand",
    "UpdateProductCommand",
]
