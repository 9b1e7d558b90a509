"""
MongoDB repository base.

Guidelines:
- One collection per aggregate, entity id stored as ``_id``
- Subclasses implement ``_to_entity`` (document -> entity) and
  ``_to_document`` (entity -> document)
- ``save`` is an upsert on ``_id`` (replace the whole document)
- Paged reads use skip/limit plus ``count_documents`` on the same filter
- Money is stored as Decimal128 so it round-trips without float error
"""

import re
from decimal import Decimal
from typing import Any, Generic, Optional, TypeVar

from bson.decimal128 import Decimal128
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING

from workhub.domain.value_objects.page import Page, PageRequest, requested_sort_field

T = TypeVar("T")

Filter = dict[str, Any]


def contains_ignore_case(term: str) -> dict[str, str]:
    """Case-insensitive substring match. The term is matched literally."""
    return {"$regex": re.escape(term), "$options": "i"}


def to_decimal128(value: Optional[Decimal]) -> Optional[Decimal128]:
    if value is None:
        return None
    return Decimal128(str(value))


def from_decimal128(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, Decimal128):
        return value.to_decimal()
    return Decimal(str(value))


class MongoRepository(Generic[T]):
    collection_name: str = ""
    default_sort: tuple[str, int] = ("created_at", DESCENDING)

    def __init__(self, database: AsyncIOMotorDatabase):
        self._collection: AsyncIOMotorCollection = database[self.collection_name]

    def _to_entity(self, document: dict[str, Any]) -> T:
        raise NotImplementedError

    def _to_document(self, entity: T) -> dict[str, Any]:
        raise NotImplementedError

    def _sort_spec(self, page: Optional[PageRequest] = None) -> list[tuple[str, int]]:
        # sortable_fields comes from the repository port
        requested = requested_sort_field(page, self.sortable_fields)
        if requested:
            field_name = "_id" if requested == "id" else requested
            direction = DESCENDING if page.descending else ASCENDING
        else:
            field_name, direction = self.default_sort
        # _id as tiebreaker keeps page boundaries stable
        if field_name == "_id":
            return [(field_name, direction)]
        return [(field_name, direction), ("_id", ASCENDING)]

    async def _find_one(self, filter: Filter) -> Optional[T]:
        document = await self._collection.find_one(filter)
        return self._to_entity(document) if document else None

    async def _find_many(self, filter: Filter) -> list[T]:
        cursor = self._collection.find(filter).sort(self._sort_spec())
        return [self._to_entity(document) async for document in cursor]

    async def _find_page(self, filter: Filter, page: PageRequest) -> Page[T]:
        sort = self._sort_spec(page)
        total = await self._collection.count_documents(filter)
        cursor = (
            self._collection.find(filter)
            .sort(sort)
            .skip(page.offset)
            .limit(page.size)
        )
        items = [self._to_entity(document) async for document in cursor]
        return Page.of(items, total, page)

    async def _find_ids(self, filter: Filter) -> list[str]:
        cursor = self._collection.find(filter, projection={"_id": 1})
        return [document["_id"] async for document in cursor]

    async def _exists(self, filter: Filter) -> bool:
        return await self._collection.count_documents(filter, limit=1) > 0

    async def _count(self, filter: Filter) -> int:
        return await self._collection.count_documents(filter)

    async def _upsert(self, entity: T) -> None:
        document = self._to_document(entity)
        await self._collection.replace_one({"_id": document["_id"]}, document, upsert=True)

    async def _delete_by_id(self, entity_id: str) -> bool:
        result = await self._collection.delete_one({"_id": entity_id})
        return result.deleted_count > 0

    async def _delete_many(self, filter: Filter) -> int:
        result = await self._collection.delete_many(filter)
        return result.deleted_count

    async def _update_many(self, filter: Filter, update: dict[str, Any]) -> int:
        result = await self._collection.update_many(filter, update)
        return result.modified_count
