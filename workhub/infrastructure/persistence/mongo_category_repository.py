"""MongoDB Category Repository Implementation."""

from typing import Any, Optional

from pymongo import ASCENDING

from workhub.domain.entities.category import Category
from workhub.domain.ports.repositories import CategoryRepository
from workhub.infrastructure.persistence.mongo_base import MongoRepository


class MongoCategoryRepository(MongoRepository[Category], CategoryRepository):
    collection_name = "categories"
    default_sort = ("name", ASCENDING)

    def _to_entity(self, document: dict[str, Any]) -> Category:
        return Category(
            id=document["_id"],
            name=document["name"],
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            description=document.get("description"),
            parent_id=document.get("parent_id"),
        )

    def _to_document(self, category: Category) -> dict[str, Any]:
        return {
            "_id": category.id,
            "name": category.name,
            "description": category.description,
            "parent_id": category.parent_id,
            "created_at": category.created_at,
            "updated_at": category.updated_at,
        }

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        return await self._find_one({"_id": category_id})

    async def get_by_name(self, name: str) -> Optional[Category]:
        return await self._find_one({"name": name})

    async def exists_by_name(self, name: str) -> bool:
        return await self._exists({"name": name})

    async def find_all(self) -> list[Category]:
        return await self._find_many({})

    async def save(self, category: Category) -> None:
        await self._upsert(category)

    async def delete(self, category_id: str) -> bool:
        return await self._delete_by_id(category_id)
