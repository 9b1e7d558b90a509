"""
Products API Router.

Every write is recorded in the audit log with the acting user, client
address and user agent.
"""

from decimal import Decimal
from logging import getLogger
from typing import Any, Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from workhub.application.commands.catalog import (
    CreateProductCommand,
    CreateProductHandler,
    DeleteProductCommand,
    DeleteProductHandler,
    UpdateProductAttributesCommand,
    UpdateProductAttributesHandler,
    UpdateProductCommand,
    UpdateProductHandler,
    UpdateProductPriceCommand,
    UpdateProductPriceHandler,
)
from workhub.application.dto import ApiResponse, PageResponse, ProductDTO
from workhub.application.queries.catalog import (
    GetProductHandler,
    GetProductQuery,
    ProductExistsHandler,
    ProductExistsQuery,
    SearchProductsHandler,
    SearchProductsQuery,
)
from workhub.domain.value_objects.page import PageRequest
from workhub.presentation.dependencies import (
    AuthUser,
    get_current_user,
    get_page_request,
    require_manager,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateProductRequest(BaseModel):
    sku: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=200)
    price: Decimal
    category: str
    currency: Optional[str] = None
    description: Optional[str] = None
    subcategory: Optional[str] = None
    attributes: dict[str, Any] = {}
    images: list[str] = []
    tags: list[str] = []
    weight: Optional[float] = Field(default=None, ge=0)
    featured: bool = False


class UpdateProductRequest(BaseModel):
    sku: Optional[str] = Field(default=None, min_length=1, max_length=64)
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    price: Optional[Decimal] = None
    category: Optional[str] = None
    description: Optional[str] = None
    subcategory: Optional[str] = None
    images: Optional[list[str]] = None
    tags: Optional[list[str]] = None
    weight: Optional[float] = Field(default=None, ge=0)
    active: Optional[bool] = None
    featured: Optional[bool] = None


class UpdatePriceRequest(BaseModel):
    price: Decimal


class UpdateAttributesRequest(BaseModel):
    attributes: dict[str, Any]


class ProductExistsResponse(BaseModel):
    sku: str
    exists: bool


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/v1/products", tags=["catalog"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=ApiResponse[ProductDTO], status_code=status.HTTP_201_CREATED)
@inject
async def create_product(
    request: CreateProductRequest,
    handler: FromDishka[CreateProductHandler],
    current_user: AuthUser = Depends(require_manager),
):
    product = await handler.execute(
        CreateProductCommand(
            sku=request.sku,
            name=request.name,
            price=request.price,
            category=request.category,
            currency=request.currency,
            description=request.description,
            subcategory=request.subcategory,
            attributes=request.attributes,
            images=tuple(request.images),
            tags=tuple(request.tags),
            weight=request.weight,
            featured=request.featured,
            actor=current_user.to_actor(),
        )
    )
    return ApiResponse.ok(ProductDTO.from_entity(product), "Product created")


@router.get("", response_model=PageResponse[ProductDTO])
@inject
async def search_products(
    handler: FromDishka[SearchProductsHandler],
    q: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[Decimal] = Query(None, ge=0),
    max_price: Optional[Decimal] = Query(None, ge=0),
    tags: list[str] = Query([]),
    page: PageRequest = Depends(get_page_request),
    current_user: AuthUser = Depends(get_current_user),
):
    """
    Product search.

    - tags given: products carrying any of the tags
    - only category given: products of that category (category must exist)
    - otherwise: text/category/price-range search
    """
    result = await handler.execute(
        SearchProductsQuery(
            page=page,
            query=q,
            category=category,
            min_price=min_price,
            max_price=max_price,
            tags=tuple(tags),
        )
    )
    return PageResponse.from_page(result, ProductDTO.from_entity)


@router.get("/sku/{sku}", response_model=ApiResponse[ProductDTO])
@inject
async def get_product_by_sku(
    sku: str,
    handler: FromDishka[GetProductHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    product = await handler.execute(GetProductQuery(sku=sku))
    return ApiResponse.ok(ProductDTO.from_entity(product))


@router.get("/sku/{sku}/exists", response_model=ApiResponse[ProductExistsResponse])
@inject
async def product_exists(
    sku: str,
    handler: FromDishka[ProductExistsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    exists = await handler.execute(ProductExistsQuery(sku=sku))
    return ApiResponse.ok(ProductExistsResponse(sku=sku, exists=exists))


@router.get("/{product_id}", response_model=ApiResponse[ProductDTO])
@inject
async def get_product(
    product_id: str,
    handler: FromDishka[GetProductHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    product = await handler.execute(GetProductQuery(product_id=product_id))
    return ApiResponse.ok(ProductDTO.from_entity(product))


@router.put("/{product_id}", response_model=ApiResponse[ProductDTO])
@inject
async def update_product(
    product_id: str,
    request: UpdateProductRequest,
    handler: FromDishka[UpdateProductHandler],
    current_user: AuthUser = Depends(require_manager),
):
    product = await handler.execute(
        UpdateProductCommand(
            product_id=product_id,
            sku=request.sku,
            name=request.name,
            price=request.price,
            category=request.category,
            description=request.description,
            subcategory=request.subcategory,
            images=tuple(request.images) if request.images is not None else None,
            tags=tuple(request.tags) if request.tags is not None else None,
            weight=request.weight,
            active=request.active,
            featured=request.featured,
            actor=current_user.to_actor(),
        )
    )
    return ApiResponse.ok(ProductDTO.from_entity(product), "Product updated")


@router.patch("/{product_id}/price", response_model=ApiResponse[ProductDTO])
@inject
async def update_product_price(
    product_id: str,
    request: UpdatePriceRequest,
    handler: FromDishka[UpdateProductPriceHandler],
    current_user: AuthUser = Depends(require_manager),
):
    product = await handler.execute(
        UpdateProductPriceCommand(
            product_id=product_id, price=request.price, actor=current_user.to_actor()
        )
    )
    return ApiResponse.ok(ProductDTO.from_entity(product), "Price updated")


@router.patch("/{product_id}/attributes", response_model=ApiResponse[ProductDTO])
@inject
async def update_product_attributes(
    product_id: str,
    request: UpdateAttributesRequest,
    handler: FromDishka[UpdateProductAttributesHandler],
    current_user: AuthUser = Depends(require_manager),
):
    """Merge ``attributes`` into the existing attribute map."""
    product = await handler.execute(
        UpdateProductAttributesCommand(
            product_id=product_id,
            attributes=request.attributes,
            actor=current_user.to_actor(),
        )
    )
    return ApiResponse.ok(ProductDTO.from_entity(product), "Attributes updated")


@router.delete("/{product_id}", response_model=ApiResponse[None])
@inject
async def delete_product(
    product_id: str,
    handler: FromDishka[DeleteProductHandler],
    current_user: AuthUser = Depends(require_manager),
):
    """Refused while an inventory record exists for the product."""
    await handler.execute(
        DeleteProductCommand(product_id=product_id, actor=current_user.to_actor())
    )
    return ApiResponse.ok(None, "Product deleted")
