"""
MongoDB Order Repository Implementation.

Mapping:
- items embedded with unit_price as Decimal128
- total is derived from items on load and stored for querying only
- shipping_address embedded as a plain sub-document
"""

from typing import Any, Optional

from workhub.domain.entities.order import Order, OrderItem, OrderStatus
from workhub.domain.ports.repositories import OrderRepository
from workhub.domain.value_objects.address import Address
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import (
    MongoRepository,
    from_decimal128,
    to_decimal128,
)


class MongoOrderRepository(MongoRepository[Order], OrderRepository):
    collection_name = "orders"

    def _to_entity(self, document: dict[str, Any]) -> Order:
        return Order(
            id=document["_id"],
            order_number=document["order_number"],
            user_id=document["user_id"],
            items=[
                OrderItem(
                    product_id=item["product_id"],
                    sku=item["sku"],
                    name=item["name"],
                    quantity=item["quantity"],
                    unit_price=from_decimal128(item["unit_price"]),
                )
                for item in document["items"]
            ],
            status=OrderStatus(document["status"]),
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            currency=document.get("currency", "USD"),
            shipping_address=Address.from_dict(document.get("shipping_address")),
            notes=document.get("notes"),
            shipped_at=document.get("shipped_at"),
            delivered_at=document.get("delivered_at"),
            cancelled_at=document.get("cancelled_at"),
        )

    def _to_document(self, order: Order) -> dict[str, Any]:
        return {
            "_id": order.id,
            "order_number": order.order_number,
            "user_id": order.user_id,
            "items": [
                {
                    "product_id": item.product_id,
                    "sku": item.sku,
                    "name": item.name,
                    "quantity": item.quantity,
                    "unit_price": to_decimal128(item.unit_price),
                }
                for item in order.items
            ],
            "total": to_decimal128(order.total),
            "currency": order.currency,
            "status": order.status.value,
            "shipping_address": (
                order.shipping_address.to_dict() if order.shipping_address else None
            ),
            "notes": order.notes,
            "shipped_at": order.shipped_at,
            "delivered_at": order.delivered_at,
            "cancelled_at": order.cancelled_at,
            "created_at": order.created_at,
            "updated_at": order.updated_at,
        }

    async def get_by_id(self, order_id: str) -> Optional[Order]:
        return await self._find_one({"_id": order_id})

    async def get_by_order_number(self, order_number: str) -> Optional[Order]:
        return await self._find_one({"order_number": order_number})

    async def find_by_user(self, user_id: str, page: PageRequest) -> Page[Order]:
        return await self._find_page({"user_id": user_id}, page)

    async def find_all_by_user(self, user_id: str) -> list[Order]:
        return await self._find_many({"user_id": user_id})

    async def find_all(self, page: PageRequest) -> Page[Order]:
        return await self._find_page({}, page)

    async def find_by_status(self, status: OrderStatus, page: PageRequest) -> Page[Order]:
        return await self._find_page({"status": status.value}, page)

    async def save(self, order: Order) -> None:
        await self._upsert(order)
