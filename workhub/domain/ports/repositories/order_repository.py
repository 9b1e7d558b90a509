"""
Order Repository Port - Interface for order persistence.
Implementation: workhub/infrastructure/persistence/mongo_order_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.order import Order, OrderStatus
from workhub.domain.value_objects.page import Page, PageRequest


class OrderRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset(
        {
            "id",
            "order_number",
            "status",
            "total",
            "created_at",
            "updated_at",
        }
    )

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Optional[Order]: ...

    @abstractmethod
    async def get_by_order_number(self, order_number: str) -> Optional[Order]: ...

    @abstractmethod
    async def find_by_user(self, user_id: str, page: PageRequest) -> Page[Order]: ...

    @abstractmethod
    async def find_all_by_user(self, user_id: str) -> list[Order]: ...

    @abstractmethod
    async def find_all(self, page: PageRequest) -> Page[Order]: ...

    @abstractmethod
    async def find_by_status(self, status: OrderStatus, page: PageRequest) -> Page[Order]: ...

    @abstractmethod
    async def save(self, order: Order) -> None: ...
