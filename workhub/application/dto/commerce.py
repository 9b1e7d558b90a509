"""Catalogue, inventory and order DTOs."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel

from workhub.application.dto.common import AddressDTO
from workhub.application.queries.orders.order_queries import OrderSummary
from workhub.domain.entities.category import Category
from workhub.domain.entities.inventory import Inventory
from workhub.domain.entities.order import Order
from workhub.domain.entities.product import Product


class CategoryDTO(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    parent_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryDTO":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            parent_id=category.parent_id,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


class ProductDTO(BaseModel):
    id: str
    sku: str
    name: str
    description: Optional[str] = None
    price: Decimal
    currency: str
    category: str
    subcategory: Optional[str] = None
    attributes: dict[str, Any]
    images: list[str]
    tags: list[str]
    weight: Optional[float] = None
    active: bool
    featured: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDTO":
        return cls(
            id=product.id,
            sku=product.sku,
            name=product.name,
            description=product.description,
            price=product.price,
            currency=product.currency,
            category=product.category,
            subcategory=product.subcategory,
            attributes=dict(product.attributes),
            images=list(product.images),
            tags=list(product.tags),
            weight=product.weight,
            active=product.active,
            featured=product.featured,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class InventoryDTO(BaseModel):
    id: str
    product_id: str
    sku: str
    quantity: int
    reserved: int
    available: int
    low_stock_threshold: int
    low_stock: bool
    updated_at: datetime

    @classmethod
    def from_entity(cls, inventory: Inventory) -> "InventoryDTO":
        return cls(
            id=inventory.id,
            product_id=inventory.product_id,
            sku=inventory.sku,
            quantity=inventory.quantity,
            reserved=inventory.reserved,
            available=inventory.available,
            low_stock_threshold=inventory.low_stock_threshold,
            low_stock=inventory.is_low_stock,
            updated_at=inventory.updated_at,
        )


class OrderItemDTO(BaseModel):
    product_id: str
    sku: str
    name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


class OrderDTO(BaseModel):
    id: str
    order_number: str
    user_id: str
    items: list[OrderItemDTO]
    total: Decimal
    currency: str
    status: str
    shipping_address: Optional[AddressDTO] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    shipped_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            order_number=order.order_number,
            user_id=order.user_id,
            items=[
                OrderItemDTO(
                    product_id=item.product_id,
                    sku=item.sku,
                    name=item.name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    subtotal=item.subtotal,
                )
                for item in order.items
            ],
            total=order.total,
            currency=order.currency,
            status=order.status.value,
            shipping_address=AddressDTO.from_value(order.shipping_address),
            notes=order.notes,
            created_at=order.created_at,
            updated_at=order.updated_at,
            shipped_at=order.shipped_at,
            delivered_at=order.delivered_at,
            cancelled_at=order.cancelled_at,
        )


class OrderSummaryDTO(BaseModel):
    user_id: str
    total_orders: int
    total_spent: Decimal
    pending_orders: int
    processing_orders: int
    completed_orders: int
    cancelled_orders: int

    @classmethod
    def from_result(cls, summary: OrderSummary) -> "OrderSummaryDTO":
        return cls(
            user_id=summary.user_id,
            total_orders=summary.total_orders,
            total_spent=summary.total_spent,
            pending_orders=summary.pending_orders,
            processing_orders=summary.processing_orders,
            completed_orders=summary.completed_orders,
            cancelled_orders=summary.cancelled_orders,
        )
