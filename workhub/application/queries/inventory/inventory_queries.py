"""Inventory queries."""

from dataclasses import dataclass

from workhub.application.common.interfaces import Query, QueryHandler
from workhub.domain.entities.inventory import Inventory
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import InventoryRepository


@dataclass(frozen=True)
class GetInventoryQuery(Query[Inventory]):
    product_id: str


@dataclass(frozen=True)
class ListLowStockQuery(Query[list[Inventory]]):
    pass


class GetInventoryHandler(QueryHandler[Inventory]):
    def __init__(self, inventory_repository: InventoryRepository):
        self._inventory_repository = inventory_repository

    async def execute(self, query: GetInventoryQuery) -> Inventory:
        inventory = await self._inventory_repository.get_by_product(query.product_id)
        if not inventory:
            raise EntityNotFoundError(f"Inventory not found for product: {query.product_id}")
        return inventory


class ListLowStockHandler(QueryHandler[list[Inventory]]):
    def __init__(self, inventory_repository: InventoryRepository):
        self._inventory_repository = inventory_repository

    async def execute(self, query: ListLowStockQuery) -> list[Inventory]:
        return await self._inventory_repository.find_low_stock()
