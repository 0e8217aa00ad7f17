"""Product and category schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from shopfront.application.queries.catalog import CategorySummary, ProductListResult
from shopfront.domain.catalog import Category, Product


class ProductResponse(BaseModel):
    id: UUID
    name: str
    description: str
    price: Decimal
    stock: int
    category_id: UUID
    images: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            category_id=product.category_id,
            images=product.images,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductListResponse(BaseModel):
    products: list[ProductResponse]
    total: int = Field(..., description="Total matches ignoring pagination")
    skip: int
    take: int

    @classmethod
    def from_result(cls, result: ProductListResult) -> "ProductListResponse":
        return cls(
            products=[ProductResponse.from_entity(p) for p in result.products],
            total=result.total,
            skip=result.skip,
            take=result.take,
        )


class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    stock: int = Field(0, ge=0)
    category_id: UUID
    images: list[str] = Field(default_factory=list)


class ProductUpdateRequest(BaseModel):
    """Partial update: omitted fields keep their value."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    stock: Optional[int] = Field(None, ge=0)
    category_id: Optional[UUID] = None
    images: Optional[list[str]] = Field(
        None,
        description="Replaces all images when given",
    )


class CategoryResponse(BaseModel):
    id: UUID
    name: str
    slug: str
    description: Optional[str]
    product_count: Optional[int] = None

    @classmethod
    def from_entity(
        cls,
        category: Category,
        product_count: Optional[int] = None,
    ) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            slug=category.slug,
            description=category.description,
            product_count=product_count,
        )

    @classmethod
    def from_summary(cls, summary: CategorySummary) -> "CategoryResponse":
        return cls.from_entity(summary.category, summary.product_count)


class CategoryRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
