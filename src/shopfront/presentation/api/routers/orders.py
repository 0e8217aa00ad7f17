"""Orders router: checkout and order history."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from shopfront.application.commands.ordering import (
    PlaceOrderCommand,
    UpdateOrderStatusCommand,
)
from shopfront.application.queries.ordering import GetOrderQuery, ListOrdersQuery
from shopfront.presentation.api.dependencies import (
    AdminUser,
    CurrentUser,
    RepoFactory,
)
from shopfront.presentation.api.schemas.common import ApiResponse
from shopfront.presentation.api.schemas.orders import (
    OrderResponse,
    UpdateOrderStatusRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List own orders",
    responses={200: {"description": "The caller's orders, newest first"}},
)
async def list_orders(
    user: CurrentUser,
    factory: RepoFactory,
) -> ApiResponse[list[OrderResponse]]:
    query = ListOrdersQuery.from_factory(factory, user)
    orders = await query.execute()
    return ApiResponse(data=[OrderResponse.from_entity(o) for o in orders])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Place order",
    responses={
        201: {"description": "Order placed from the cart"},
        400: {"description": "Cart is empty or stock is insufficient"},
    },
)
async def place_order(
    user: CurrentUser,
    factory: RepoFactory,
) -> ApiResponse[OrderResponse]:
    """
    Convert the caller's cart into a PENDING order.

    Stock decrement, order creation and cart clearing commit together or
    not at all.
    """
    command = PlaceOrderCommand.from_factory(factory, user)

    try:
        order = await command.execute()
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return ApiResponse(data=OrderResponse.from_entity(order))


@router.get(
    "/{order_id}",
    summary="Get order",
    responses={
        200: {"description": "Order details"},
        403: {"description": "Order belongs to another customer"},
        404: {"description": "Order not found"},
    },
)
async def get_order(
    order_id: UUID,
    user: CurrentUser,
    factory: RepoFactory,
) -> ApiResponse[OrderResponse]:
    query = GetOrderQuery.from_factory(factory, user)
    order = await query.execute(order_id)
    return ApiResponse(data=OrderResponse.from_entity(order))


@router.put(
    "/{order_id}",
    summary="Update order status",
    responses={
        200: {"description": "Status updated (or unchanged)"},
        400: {"description": "Unknown status"},
        403: {"description": "Admin access required"},
        404: {"description": "Order not found"},
        409: {"description": "Transition not allowed"},
    },
)
async def update_order_status(
    order_id: UUID,
    request: UpdateOrderStatusRequest,
    admin: AdminUser,
    factory: RepoFactory,
) -> ApiResponse[OrderResponse]:
    command = UpdateOrderStatusCommand.from_factory(factory)

    try:
        order = await command.execute(order_id=order_id, status=request.status)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    logger.debug("Order %s status set by admin %s", order.id, admin.user_id)
    return ApiResponse(data=OrderResponse.from_entity(order))
