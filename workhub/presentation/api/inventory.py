"""Inventory API Router. Order placement and status changes adjust stock on their own."""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from workhub.application.commands.inventory import (
    CreateInventoryCommand,
    CreateInventoryHandler,
    RestockInventoryCommand,
    RestockInventoryHandler,
)
from workhub.application.dto import ApiResponse, InventoryDTO
from workhub.application.queries.inventory import (
    GetInventoryHandler,
    GetInventoryQuery,
    ListLowStockHandler,
    ListLowStockQuery,
)
from workhub.presentation.dependencies import AuthUser, get_current_user, require_manager


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateInventoryRequest(BaseModel):
    product_id: str
    quantity: int = Field(default=0, ge=0)
    low_stock_threshold: Optional[int] = Field(default=None, ge=0)


class RestockRequest(BaseModel):
    quantity: int = Field(gt=0)


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/inventory", tags=["inventory"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=ApiResponse[InventoryDTO], status_code=status.HTTP_201_CREATED)
@inject
async def create_inventory(
    request: CreateInventoryRequest,
    handler: FromDishka[CreateInventoryHandler],
    current_user: AuthUser = Depends(require_manager),
):
    inventory = await handler.execute(
        CreateInventoryCommand(
            product_id=request.product_id,
            quantity=request.quantity,
            low_stock_threshold=request.low_stock_threshold,
        )
    )
    return ApiResponse.ok(InventoryDTO.from_entity(inventory), "Inventory created")


@router.get("/low-stock", response_model=ApiResponse[list[InventoryDTO]])
@inject
async def list_low_stock(
    handler: FromDishka[ListLowStockHandler],
    current_user: AuthUser = Depends(require_manager),
):
    records = await handler.execute(ListLowStockQuery())
    return ApiResponse.ok([InventoryDTO.from_entity(r) for r in records])


@router.get("/{product_id}", response_model=ApiResponse[InventoryDTO])
@inject
async def get_inventory(
    product_id: str,
    handler: FromDishka[GetInventoryHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    inventory = await handler.execute(GetInventoryQuery(product_id=product_id))
    return ApiResponse.ok(InventoryDTO.from_entity(inventory))


@router.post("/{product_id}/restock", response_model=ApiResponse[InventoryDTO])
@inject
async def restock(
    product_id: str,
    request: RestockRequest,
    handler: FromDishka[RestockInventoryHandler],
    current_user: AuthUser = Depends(require_manager),
):
    inventory = await handler.execute(
        RestockInventoryCommand(product_id=product_id, quantity=request.quantity)
    )
    return ApiResponse.ok(InventoryDTO.from_entity(inventory), "Inventory restocked")
