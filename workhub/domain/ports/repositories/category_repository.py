"""
Category Repository Port - Interface for category persistence.
Implementation: workhub/infrastructure/persistence/mongo_category_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from workhub.domain.entities.category import Category


class CategoryRepository(ABC):
    # Fields a paged listing may be sorted by ("id" maps to _id)
    sortable_fields = frozenset({"id", "name", "created_at", "updated_at"})

    @abstractmethod
    async def get_by_id(self, category_id: str) -> Optional[Category]: ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Category]: ...

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool: ...

    @abstractmethod
    async def find_all(self) -> list[Category]: ...

    @abstractmethod
    async def save(self, category: Category) -> None: ...

    @abstractmethod
    async def delete(self, category_id: str) -> bool: ...
