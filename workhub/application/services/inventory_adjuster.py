"""
Inventory Adjuster - Applies order side effects to per-product stock.

Used by the order handlers:
- place order       -> ensure_available + reserve every line
- cancel            -> release every line
- ship / complete   -> deduct every line

Every adjustment is a separate load-modify-save round trip. Nothing ties
the writes of one order together, so a failure part-way leaves earlier
lines adjusted.
"""

from logging import getLogger

from workhub.domain.entities.inventory import Inventory
from workhub.domain.entities.order import OrderItem
from workhub.domain.exceptions import EntityNotFoundError, ProductOutOfStockError
from workhub.domain.ports.repositories import InventoryRepository
from workhub.observability.metrics import InventoryOperation, increment_inventory_adjustment

logger = getLogger(__name__)


class InventoryAdjuster:
    def __init__(self, inventory_repository: InventoryRepository):
        self._inventory_repository = inventory_repository

    async def _load(self, product_id: str) -> Inventory:
        inventory = await self._inventory_repository.get_by_product(product_id)
        if inventory is None:
            raise EntityNotFoundError(f"Inventory not found for product: {product_id}")
        return inventory

    async def ensure_available(self, product_id: str, product_name: str, quantity: int) -> None:
        inventory = await self._inventory_repository.get_by_product(product_id)
        available = inventory.available if inventory else 0
        if available < quantity:
            raise ProductOutOfStockError(product_name, quantity, available)

    async def reserve(self, item: OrderItem) -> Inventory:
        inventory = await self._load(item.product_id)
        inventory.reserve(item.quantity)
        await self._inventory_repository.save(inventory)
        increment_inventory_adjustment(InventoryOperation.RESERVE)
        logger.debug("Reserved %d of %s", item.quantity, item.sku)
        return inventory

    async def release(self, item: OrderItem) -> Inventory:
        inventory = await self._load(item.product_id)
        inventory.release(item.quantity)
        await self._inventory_repository.save(inventory)
        increment_inventory_adjustment(InventoryOperation.RELEASE)
        logger.debug("Released %d of %s", item.quantity, item.sku)
        return inventory

    async def deduct(self, item: OrderItem) -> Inventory:
        inventory = await self._load(item.product_id)
        inventory.deduct(item.quantity)
        await self._inventory_repository.save(inventory)
        increment_inventory_adjustment(InventoryOperation.DEDUCT)
        logger.debug("Deducted %d of %s", item.quantity, item.sku)
        return inventory

    async def reserve_all(self, items: list[OrderItem]) -> None:
        for item in items:
            await self.reserve(item)

    async def release_all(self, items: list[OrderItem]) -> None:
        for item in items:
            await self.release(item)

    async def deduct_all(self, items: list[OrderItem]) -> None:
        for item in items:
            await self.deduct(item)
