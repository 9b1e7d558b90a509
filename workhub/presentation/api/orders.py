"""
Orders API Router.

Owners see and change their own orders; ADMIN sees all. Status changes
(which reserve, release or deduct inventory) need ADMIN or MANAGER.
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from workhub.application.commands.orders import (
    CancelOrderCommand,
    CancelOrderHandler,
    OrderLine,
    PlaceOrderCommand,
    PlaceOrderHandler,
    UpdateOrderStatusCommand,
    UpdateOrderStatusHandler,
    UpdateShippingAddressCommand,
    UpdateShippingAddressHandler,
)
from workhub.application.dto import AddressDTO, ApiResponse, OrderDTO, PageResponse
from workhub.application.queries.orders import (
    GetOrderHandler,
    GetOrderQuery,
    ListOrdersHandler,
    ListOrdersQuery,
)
from workhub.domain.entities.order import Order, OrderStatus
from workhub.domain.value_objects.page import PageRequest
from workhub.presentation.dependencies import (
    AuthUser,
    get_current_user,
    get_page_request,
    require_manager,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class OrderLineRequest(BaseModel):
    product_id: str
    quantity: int = Field(gt=0)


class PlaceOrderRequest(BaseModel):
    items: list[OrderLineRequest] = Field(min_length=1)
    shipping_address: Optional[AddressDTO] = None
    notes: Optional[str] = None
    user_id: Optional[str] = Field(
        default=None, description="Place on behalf of another user (ADMIN only)"
    )


class UpdateOrderStatusRequest(BaseModel):
    status: OrderStatus


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


async def _load_visible_order(
    handler: GetOrderHandler, current_user: AuthUser, order_id: str
) -> Order:
    order = await handler.execute(GetOrderQuery(order_id=order_id))
    current_user.ensure_self_or_admin(order.user_id)
    return order


# ==================== ENDPOINTS ====================


@router.post("", response_model=ApiResponse[OrderDTO], status_code=status.HTTP_201_CREATED)
@inject
async def place_order(
    request: PlaceOrderRequest,
    handler: FromDishka[PlaceOrderHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Place an order; every line must be in stock and is reserved."""
    user_id = request.user_id or current_user.user_id
    current_user.ensure_self_or_admin(user_id)

    order = await handler.execute(
        PlaceOrderCommand(
            user_id=user_id,
            lines=tuple(OrderLine(product_id=i.product_id, quantity=i.quantity) for i in request.items),
            shipping_address=(
                request.shipping_address.to_value() if request.shipping_address else None
            ),
            notes=request.notes,
        )
    )
    return ApiResponse.ok(OrderDTO.from_entity(order), "Order placed")


@router.get("", response_model=PageResponse[OrderDTO])
@inject
async def list_orders(
    handler: FromDishka[ListOrdersHandler],
    user_id: Optional[str] = None,
    order_status: Optional[OrderStatus] = Query(None, alias="status"),
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    """Non-admins always get their own orders; admins may filter by user or status."""
    if not current_user.is_admin:
        user_id = current_user.user_id
    result = await handler.execute(
        ListOrdersQuery(page=page, user_id=user_id, status=order_status)
    )
    return PageResponse.from_page(result, OrderDTO.from_entity)


@router.get("/number/{order_number}", response_model=ApiResponse[OrderDTO])
@inject
async def get_order_by_number(
    order_number: str,
    handler: FromDishka[GetOrderHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    order = await handler.execute(GetOrderQuery(order_number=order_number))
    current_user.ensure_self_or_admin(order.user_id)
    return ApiResponse.ok(OrderDTO.from_entity(order))


@router.get("/{order_id}", response_model=ApiResponse[OrderDTO])
@inject
async def get_order(
    order_id: str,
    handler: FromDishka[GetOrderHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    order = await _load_visible_order(handler, current_user, order_id)
    return ApiResponse.ok(OrderDTO.from_entity(order))


@router.patch("/{order_id}/status", response_model=ApiResponse[OrderDTO])
@inject
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    handler: FromDishka[UpdateOrderStatusHandler],
    current_user: AuthUser = Depends(require_manager),
):
    order = await handler.execute(
        UpdateOrderStatusCommand(order_id=order_id, status=request.status)
    )
    return ApiResponse.ok(OrderDTO.from_entity(order), "Order status updated")


@router.put("/{order_id}/shipping-address", response_model=ApiResponse[OrderDTO])
@inject
async def update_shipping_address(
    order_id: str,
    request: AddressDTO,
    get_handler: FromDishka[GetOrderHandler],
    handler: FromDishka[UpdateShippingAddressHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    await _load_visible_order(get_handler, current_user, order_id)
    order = await handler.execute(
        UpdateShippingAddressCommand(order_id=order_id, address=request.to_value())
    )
    return ApiResponse.ok(OrderDTO.from_entity(order), "Shipping address updated")


@router.post("/{order_id}/cancel", response_model=ApiResponse[OrderDTO])
@inject
async def cancel_order(
    order_id: str,
    get_handler: FromDishka[GetOrderHandler],
    handler: FromDishka[CancelOrderHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Cancel and release reserved stock. Refused once shipped."""
    await _load_visible_order(get_handler, current_user, order_id)
    order = await handler.execute(CancelOrderCommand(order_id=order_id))
    return ApiResponse.ok(OrderDTO.from_entity(order), "Order cancelled")
