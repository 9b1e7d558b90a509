"""MongoDB Inventory Repository Implementation. One counter document per product."""

from typing import Any, Optional

from pymongo import DESCENDING

from workhub.domain.entities.inventory import Inventory
from workhub.domain.ports.repositories import InventoryRepository
from workhub.infrastructure.persistence.mongo_base import MongoRepository


class MongoInventoryRepository(MongoRepository[Inventory], InventoryRepository):
    collection_name = "inventory"
    default_sort = ("updated_at", DESCENDING)

    def _to_entity(self, document: dict[str, Any]) -> Inventory:
        return Inventory(
            id=document["_id"],
            product_id=document["product_id"],
            sku=document["sku"],
            quantity=document["quantity"],
            reserved=document.get("reserved", 0),
            low_stock_threshold=document["low_stock_threshold"],
            updated_at=document["updated_at"],
        )

    def _to_document(self, inventory: Inventory) -> dict[str, Any]:
        return {
            "_id": inventory.id,
            "product_id": inventory.product_id,
            "sku": inventory.sku,
            "quantity": inventory.quantity,
            "reserved": inventory.reserved,
            "low_stock_threshold": inventory.low_stock_threshold,
            "updated_at": inventory.updated_at,
        }

    async def get_by_product(self, product_id: str) -> Optional[Inventory]:
        return await self._find_one({"product_id": product_id})

    async def exists_by_product(self, product_id: str) -> bool:
        return await self._exists({"product_id": product_id})

    async def find_low_stock(self) -> list[Inventory]:
        # available = quantity - reserved
        return await self._find_many(
            {
                "$expr": {
                    "$lte": [
                        {"$subtract": ["$quantity", "$reserved"]},
                        "$low_stock_threshold",
                    ]
                }
            }
        )

    async def save(self, inventory: Inventory) -> None:
        await self._upsert(inventory)
