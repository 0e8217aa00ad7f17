from shopfront.application.queries.catalog.list_categories_query import (
    CategorySummary,
    ListCategoriesQuery,
)
from shopfront.application.queries.catalog.product_queries import (
    GetProductQuery,
    ListProductsQuery,
    ProductListResult,
)

__all__ = [
    "CategorySummary",
    "GetProductQuery",
    "ListCategoriesQuery",
    "ListProductsQuery",
    "ProductListResult",
]
