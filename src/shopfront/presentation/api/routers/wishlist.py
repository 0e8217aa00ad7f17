"""Wishlist router."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from shopfront.application.commands.wishlist import (
    AddWishlistItemCommand,
    RemoveWishlistItemCommand,
)
from shopfront.application.queries.wishlist import ListWishlistQuery
from shopfront.presentation.api.dependencies import CurrentUser, RepoFactory
from shopfront.presentation.api.schemas.common import ApiResponse, MessageResponse
from shopfront.presentation.api.schemas.wishlist import (
    AddWishlistItemRequest,
    WishlistItemResponse,
)

router = APIRouter()


@router.get("", summary="List wishlist")
async def list_wishlist(
    user: CurrentUser,
    factory: RepoFactory,
) -> ApiResponse[list[WishlistItemResponse]]:
    query = ListWishlistQuery.from_factory(factory, user)
    items = await query.execute()
    return ApiResponse(data=[WishlistItemResponse.from_entity(i) for i in items])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Add to wishlist",
    responses={
        201: {"description": "Product added"},
        404: {"description": "Product not found"},
        409: {"description": "Product already in wishlist"},
    },
)
async def add_wishlist_item(
    request: AddWishlistItemRequest,
    user: CurrentUser,
    factory: RepoFactory,
) -> ApiResponse[WishlistItemResponse]:
    command = AddWishlistItemCommand.from_factory(factory, user)

    try:
        item = await command.execute(request.product_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(data=WishlistItemResponse.from_entity(item))


@router.delete(
    "",
    summary="Remove from wishlist",
    responses={200: {"description": "Removed (also when it was not listed)"}},
)
async def remove_wishlist_item(
    product_id: Annotated[UUID, Query(description="Product to remove")],
    user: CurrentUser,
    factory: RepoFactory,
) -> ApiResponse[MessageResponse]:
    command = RemoveWishlistItemCommand.from_factory(factory, user)

    try:
        await command.execute(product_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(data=MessageResponse(message="Removed from wishlist"))
