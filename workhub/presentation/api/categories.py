"""Categories API Router. Reads are open to any user; writes need ADMIN or MANAGER."""

from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from workhub.application.commands.catalog import (
    CreateCategoryCommand,
    CreateCategoryHandler,
    DeleteCategoryCommand,
    DeleteCategoryHandler,
    UpdateCategoryCommand,
    UpdateCategoryHandler,
)
from workhub.application.dto import ApiResponse, CategoryDTO
from workhub.application.queries.catalog import (
    GetCategoryHandler,
    GetCategoryQuery,
    ListCategoriesHandler,
    ListCategoriesQuery,
)
from workhub.presentation.dependencies import AuthUser, get_current_user, require_manager


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateCategoryRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    parent_id: Optional[str] = None


class UpdateCategoryRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    parent_id: Optional[str] = None


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/categories", tags=["catalog"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=ApiResponse[CategoryDTO], status_code=status.HTTP_201_CREATED)
@inject
async def create_category(
    request: CreateCategoryRequest,
    handler: FromDishka[CreateCategoryHandler],
    current_user: AuthUser = Depends(require_manager),
):
    category = await handler.execute(
        CreateCategoryCommand(
            name=request.name, description=request.description, parent_id=request.parent_id
        )
    )
    return ApiResponse.ok(CategoryDTO.from_entity(category), "Category created")


@router.get("", response_model=ApiResponse[list[CategoryDTO]])
@inject
async def list_categories(
    handler: FromDishka[ListCategoriesHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    categories = await handler.execute(ListCategoriesQuery())
    return ApiResponse.ok([CategoryDTO.from_entity(c) for c in categories])


@router.get("/{category_id}", response_model=ApiResponse[CategoryDTO])
@inject
async def get_category(
    category_id: str,
    handler: FromDishka[GetCategoryHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    category = await handler.execute(GetCategoryQuery(category_id=category_id))
    return ApiResponse.ok(CategoryDTO.from_entity(category))


@router.put("/{category_id}", response_model=ApiResponse[CategoryDTO])
@inject
async def update_category(
    category_id: str,
    request: UpdateCategoryRequest,
    handler: FromDishka[UpdateCategoryHandler],
    current_user: AuthUser = Depends(require_manager),
):
    category = await handler.execute(
        UpdateCategoryCommand(
            category_id=category_id,
            name=request.name,
            description=request.description,
            parent_id=request.parent_id,
        )
    )
    return ApiResponse.ok(CategoryDTO.from_entity(category), "Category updated")


@router.delete("/{category_id}", response_model=ApiResponse[None])
@inject
async def delete_category(
    category_id: str,
    handler: FromDishka[DeleteCategoryHandler],
    current_user: AuthUser = Depends(require_manager),
):
    """Refused while any product still references the category."""
    await handler.execute(DeleteCategoryCommand(category_id=category_id))
    return ApiResponse.ok(None, "Category deleted")
