"""Cart router: the caller's own cart."""

import logging

from fastapi import APIRouter, status

from shopfront.application.commands.cart import (
    AddCartItemCommand,
    UpdateCartItemCommand,
)
from shopfront.application.queries.cart import GetCartQuery
from shopfront.presentation.api.dependencies import CurrentUser, RepoFactory
from shopfront.presentation.api.schemas.cart import (
    AddCartItemRequest,
    CartResponse,
    UpdateCartItemRequest,
)
from shopfront.presentation.api.schemas.common import ApiResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="Get cart",
    responses={
        200: {"description": "The cart with its live subtotal"},
        401: {"description": "Not authenticated"},
    },
)
async def get_cart(
    user: CurrentUser,
    factory: RepoFactory,
) -> ApiResponse[CartResponse]:
    """Get the caller's cart, creating an empty one on first access."""
    query = GetCartQuery.from_factory(factory, user)

    try:
        cart = await query.execute()
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(data=CartResponse.from_entity(cart))


@router.post(
    "/items",
    status_code=status.HTTP_201_CREATED,
    summary="Add item to cart",
    responses={
        201: {"description": "Item added; quantities accumulate"},
        400: {"description": "Invalid quantity or insufficient stock"},
        404: {"description": "Product not found"},
    },
)
async def add_cart_item(
    request: AddCartItemRequest,
    user: CurrentUser,
    factory: RepoFactory,
) -> ApiResponse[CartResponse]:
    command = AddCartItemCommand.from_factory(factory, user)

    try:
        cart = await command.execute(
            product_id=request.product_id,
            quantity=request.quantity,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(data=CartResponse.from_entity(cart))


@router.put(
    "/items",
    summary="Set item quantity",
    responses={
        200: {"description": "Quantity set; 0 removes the line"},
        400: {"description": "Invalid quantity or insufficient stock"},
        404: {"description": "No such line item"},
    },
)
async def update_cart_item(
    request: UpdateCartItemRequest,
    user: CurrentUser,
    factory: RepoFactory,
) -> ApiResponse[CartResponse]:
    command = UpdateCartItemCommand.from_factory(factory, user)

    try:
        cart = await command.execute(
            product_id=request.product_id,
            quantity=request.quantity,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(data=CartResponse.from_entity(cart))
