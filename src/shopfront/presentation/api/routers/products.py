"""Product catalog router. Reads are public, writes need an admin."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from shopfront.application.commands.catalog import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from shopfront.application.queries.catalog import GetProductQuery, ListProductsQuery
from shopfront.application.queries.catalog.product_queries import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
)
from shopfront.presentation.api.dependencies import AdminUser, RepoFactory
from shopfront.presentation.api.schemas.catalog import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from shopfront.presentation.api.schemas.common import ApiResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()

CategoryFilter = Annotated[
    Optional[UUID],
    Query(alias="categoryId", description="Only products of this category"),
]
SkipParam = Annotated[int, Query(ge=0, description="Products to skip")]
TakeParam = Annotated[
    int,
    Query(ge=1, le=MAX_PAGE_SIZE, description="Page size"),
]


@router.get(
    "",
    summary="List products",
    responses={200: {"description": "A page of products and the total count"}},
)
async def list_products(
    factory: RepoFactory,
    category_id: CategoryFilter = None,
    skip: SkipParam = 0,
    take: TakeParam = DEFAULT_PAGE_SIZE,
) -> ApiResponse[ProductListResponse]:
    query = ListProductsQuery.from_factory(factory)
    result = await query.execute(category_id=category_id, skip=skip, take=take)
    return ApiResponse(data=ProductListResponse.from_result(result))


@router.get(
    "/{product_id}",
    summary="Get product",
    responses={
        200: {"description": "Product details"},
        404: {"description": "Product not found"},
    },
)
async def get_product(
    product_id: UUID,
    factory: RepoFactory,
) -> ApiResponse[ProductResponse]:
    query = GetProductQuery.from_factory(factory)
    product = await query.execute(product_id)
    return ApiResponse(data=ProductResponse.from_entity(product))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
    responses={
        201: {"description": "Product created"},
        400: {"description": "Invalid input"},
        403: {"description": "Admin access required"},
        404: {"description": "Category not found"},
    },
)
async def create_product(
    request: ProductCreateRequest,
    admin: AdminUser,
    factory: RepoFactory,
) -> ApiResponse[ProductResponse]:
    command = CreateProductCommand.from_factory(factory)

    try:
        product = await command.execute(
            name=request.name,
            description=request.description,
            price=request.price,
            stock=request.stock,
            category_id=request.category_id,
            images=request.images,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Product %s created by admin %s", product.id, admin.user_id)
    return ApiResponse(data=ProductResponse.from_entity(product))


@router.put(
    "/{product_id}",
    summary="Update product",
    responses={
        200: {"description": "Product updated"},
        400: {"description": "Invalid input"},
        403: {"description": "Admin access required"},
        404: {"description": "Product or category not found"},
    },
)
async def update_product(
    product_id: UUID,
    request: ProductUpdateRequest,
    admin: AdminUser,
    factory: RepoFactory,
) -> ApiResponse[ProductResponse]:
    """Partially update a product. An ``images`` list replaces all images."""
    command = UpdateProductCommand.from_factory(factory)

    try:
        product = await command.execute(
            product_id=product_id,
            name=request.name,
            description=request.description,
            price=request.price,
            stock=request.stock,
            category_id=request.category_id,
            images=request.images,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Product %s updated by admin %s", product.id, admin.user_id)
    return ApiResponse(data=ProductResponse.from_entity(product))


@router.delete(
    "/{product_id}",
    summary="Delete product",
    responses={
        200: {"description": "Product deleted"},
        403: {"description": "Admin access required"},
        404: {"description": "Product not found"},
        409: {"description": "Product is referenced by an order"},
    },
)
async def delete_product(
    product_id: UUID,
    admin: AdminUser,
    factory: RepoFactory,
) -> ApiResponse[MessageResponse]:
    command = DeleteProductCommand.from_factory(factory)

    try:
        await command.execute(product_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Product %s deleted by admin %s", product_id, admin.user_id)
    return ApiResponse(data=MessageResponse(message="Product deleted"))
