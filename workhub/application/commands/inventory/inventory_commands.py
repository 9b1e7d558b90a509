"""Inventory commands: one record per product, restocked in positive steps."""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.config.settings import Config
from workhub.domain.entities.inventory import Inventory
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
)
from workhub.domain.ports.repositories import InventoryRepository, ProductRepository
from workhub.observability.metrics import InventoryOperation, increment_inventory_adjustment

logger = getLogger(__name__)


@dataclass(frozen=True)
class CreateInventoryCommand(Command[Inventory]):
    product_id: str
    quantity: int = 0
    low_stock_threshold: Optional[int] = None


@dataclass(frozen=True)
class RestockInventoryCommand(Command[Inventory]):
    product_id: str
    quantity: int


class CreateInventoryHandler(CommandHandler[Inventory]):
    def __init__(
        self,
        inventory_repository: InventoryRepository,
        product_repository: ProductRepository,
    ):
        self._inventory_repository = inventory_repository
        self._product_repository = product_repository

    async def execute(self, command: CreateInventoryCommand) -> Inventory:
        if command.quantity < 0:
            raise DomainValidationError("Quantity must not be negative")
        threshold = (
            command.low_stock_threshold
            if command.low_stock_threshold is not None
            else Config.LOW_STOCK_THRESHOLD
        )
        if threshold < 0:
            raise DomainValidationError("Low stock threshold must not be negative")

        product = await self._product_repository.get_by_id(command.product_id)
        if not product:
            raise EntityNotFoundError.for_id("Product", command.product_id)
        if await self._inventory_repository.exists_by_product(product.id):
            raise EntityAlreadyExistsError(
                f"Inventory already exists for product: {product.id}"
            )

        inventory = Inventory.create(
            product_id=product.id,
            sku=product.sku,
            quantity=command.quantity,
            low_stock_threshold=threshold,
        )
        await self._inventory_repository.save(inventory)
        logger.info("Created inventory for %s with %d unit(s)", product.sku, inventory.quantity)
        return inventory


class RestockInventoryHandler(CommandHandler[Inventory]):
    def __init__(self, inventory_repository: InventoryRepository):
        self._inventory_repository = inventory_repository

    async def execute(self, command: RestockInventoryCommand) -> Inventory:
        if command.quantity <= 0:
            raise DomainValidationError("Restock quantity must be positive")
        inventory = await self._inventory_repository.get_by_product(command.product_id)
        if not inventory:
            raise EntityNotFoundError(
                f"Inventory not found for product: {command.product_id}"
            )
        inventory.restock(command.quantity)
        await self._inventory_repository.save(inventory)
        increment_inventory_adjustment(InventoryOperation.RESTOCK)
        logger.info("Restocked %s by %d to %d", inventory.sku, command.quantity, inventory.quantity)
        return inventory
