"""
Product Repository Port - Interface for product persistence.
Implementation: workhub/infrastructure/persistence/mongo_product_repository.py
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional
from workhub.domain.entities.product import Product
from workhub.domain.value_objects.page import Page, PageRequest


class ProductRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset(
        {
            "id",
            "sku",
            "name",
            "price",
            "category",
            "created_at",
            "updated_at",
        }
    )

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Optional[Product]: ...

    @abstractmethod
    async def get_by_sku(self, sku: str) -> Optional[Product]: ...

    @abstractmethod
    async def exists_by_sku(self, sku: str) -> bool: ...

    @abstractmethod
    async def find_by_category(
        self, category: str, page: PageRequest
    ) -> Page[Product]: ...

    @abstractmethod
    async def find_by_tags(self, tags: list[str], page: PageRequest) -> Page[Product]: ...

    @abstractmethod
    async def search(
        self,
        query: Optional[str],
        category: Optional[str],
        min_price: Optional[Decimal],
        max_price: Optional[Decimal],
        page: PageRequest,
    ) -> Page[Product]: ...

    @abstractmethod
    async def count_by_category(self, category: str) -> int: ...

    @abstractmethod
    async def save(self, product: Product) -> None: ...

    @abstractmethod
    async def delete(self, product_id: str) -> bool: ...
