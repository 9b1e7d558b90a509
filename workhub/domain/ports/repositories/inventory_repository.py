"""
Inventory Repository Port - Interface for stock counters.
Implementation: workhub/infrastructure/persistence/mongo_inventory_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.inventory import Inventory


class InventoryRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset({"id", "sku", "quantity", "reserved", "updated_at"})

    @abstractmethod
    async def get_by_product(self, product_id: str) -> Optional[Inventory]: ...

    @abstractmethod
    async def exists_by_product(self, product_id: str) -> bool: ...

    @abstractmethod
    async def find_low_stock(self) -> list[Inventory]: ...

    @abstractmethod
    async def save(self, inventory: Inventory) -> None: ...
