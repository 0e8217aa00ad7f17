"""Admin router: categories and the order overview."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from shopfront.application.commands.catalog import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from shopfront.application.queries.catalog import ListCategoriesQuery
from shopfront.application.queries.ordering import ListAllOrdersQuery
from shopfront.presentation.api.dependencies import AdminUser, RepoFactory
from shopfront.presentation.api.schemas.catalog import (
    CategoryRequest,
    CategoryResponse,
)
from shopfront.presentation.api.schemas.common import ApiResponse, MessageResponse
from shopfront.presentation.api.schemas.orders import OrderResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/categories",
    summary="List categories",
    responses={200: {"description": "Categories with product counts"}},
)
async def list_categories(
    _: AdminUser,
    factory: RepoFactory,
) -> ApiResponse[list[CategoryResponse]]:
    query = ListCategoriesQuery.from_factory(factory)
    summaries = await query.execute()
    return ApiResponse(data=[CategoryResponse.from_summary(s) for s in summaries])


@router.post(
    "/categories",
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    responses={
        201: {"description": "Category created"},
        409: {"description": "Name or slug already used"},
    },
)
async def create_category(
    request: CategoryRequest,
    admin: AdminUser,
    factory: RepoFactory,
) -> ApiResponse[CategoryResponse]:
    command = CreateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            name=request.name,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Category %s created by admin %s", category.slug, admin.user_id)
    return ApiResponse(data=CategoryResponse.from_entity(category, product_count=0))


@router.put(
    "/categories/{category_id}",
    summary="Update category",
    responses={
        200: {"description": "Category updated"},
        404: {"description": "Category not found"},
        409: {"description": "Name or slug already used"},
    },
)
async def update_category(
    category_id: UUID,
    request: CategoryRequest,
    admin: AdminUser,
    factory: RepoFactory,
) -> ApiResponse[CategoryResponse]:
    command = UpdateCategoryCommand.from_factory(factory)

    try:
        category = await command.execute(
            category_id=category_id,
            name=request.name,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Category %s updated by admin %s", category.id, admin.user_id)
    return ApiResponse(data=CategoryResponse.from_entity(category))


@router.delete(
    "/categories/{category_id}",
    summary="Delete category",
    responses={
        200: {"description": "Category deleted"},
        404: {"description": "Category not found"},
        409: {"description": "Category still has products"},
    },
)
async def delete_category(
    category_id: UUID,
    admin: AdminUser,
    factory: RepoFactory,
) -> ApiResponse[MessageResponse]:
    command = DeleteCategoryCommand.from_factory(factory)

    try:
        await command.execute(category_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.info("Category %s deleted by admin %s", category_id, admin.user_id)
    return ApiResponse(data=MessageResponse(message="Category deleted"))


@router.get(
    "/orders",
    summary="List all orders",
    responses={200: {"description": "Every order with its customer, newest first"}},
)
async def list_all_orders(
    _: AdminUser,
    factory: RepoFactory,
) -> ApiResponse[list[OrderResponse]]:
    query = ListAllOrdersQuery.from_factory(factory)
    views = await query.execute()
    return ApiResponse(data=[OrderResponse.from_admin_view(v) for v in views])
