"""
MongoDB Product Repository Implementation.

Mapping:
- price stored as Decimal128 so range filters compare exactly
- category stored by name (matches Category.name)
"""

from decimal import Decimal
from typing import Any, Optional

from workhub.domain.entities.product import Product
from workhub.domain.ports.repositories import ProductRepository
from workhub.domain.value_objects.page import Page, PageRequest
from workhub.infrastructure.persistence.mongo_base import (
    MongoRepository,
    contains_ignore_case,
    from_decimal128,
    to_decimal128,
)


class MongoProductRepository(MongoRepository[Product], ProductRepository):
    collection_name = "products"

    def _to_entity(self, document: dict[str, Any]) -> Product:
        return Product(
            id=document["_id"],
            sku=document["sku"],
            name=document["name"],
            price=from_decimal128(document["price"]),
            category=document["category"],
            created_at=document["created_at"],
            updated_at=document["updated_at"],
            currency=document.get("currency", "USD"),
            description=document.get("description"),
            subcategory=document.get("subcategory"),
            attributes=dict(document.get("attributes") or {}),
            images=list(document.get("images") or []),
            tags=list(document.get("tags") or []),
            weight=document.get("weight"),
            active=document.get("active", True),
            featured=document.get("featured", False),
        )

    def _to_document(self, product: Product) -> dict[str, Any]:
        return {
            "_id": product.id,
            "sku": product.sku,
            "name": product.name,
            "description": product.description,
            "price": to_decimal128(product.price),
            "currency": product.currency,
            "category": product.category,
            "subcategory": product.subcategory,
            "attributes": product.attributes,
            "images": list(product.images),
            "tags": list(product.tags),
            "weight": product.weight,
            "active": product.active,
            "featured": product.featured,
            "created_at": product.created_at,
            "updated_at": product.updated_at,
        }

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        return await self._find_one({"_id": product_id})

    async def get_by_sku(self, sku: str) -> Optional[Product]:
        return await self._find_one({"sku": sku})

    async def exists_by_sku(self, sku: str) -> bool:
        return await self._exists({"sku": sku})

    async def find_by_category(self, category: str, page: PageRequest) -> Page[Product]:
        return await self._find_page({"category": category}, page)

    async def find_by_tags(self, tags: list[str], page: PageRequest) -> Page[Product]:
        return await self._find_page({"tags": {"$in": list(tags)}}, page)

    async def search(
        self,
        query: Optional[str],
        category: Optional[str],
        min_price: Optional[Decimal],
        max_price: Optional[Decimal],
        page: PageRequest,
    ) -> Page[Product]:
        filter: dict[str, Any] = {}
        if query:
            pattern = contains_ignore_case(query)
            filter["$or"] = [{"name": pattern}, {"description": pattern}, {"sku": pattern}]
        if category:
            filter["category"] = category
        price: dict[str, Any] = {}
        if min_price is not None:
            price["$gte"] = to_decimal128(min_price)
        if max_price is not None:
            price["$lte"] = to_decimal128(max_price)
        if price:
            filter["price"] = price
        return await self._find_page(filter, page)

    async def count_by_category(self, category: str) -> int:
        return await self._count({"category": category})

    async def save(self, product: Product) -> None:
        await self._upsert(product)

    async def delete(self, product_id: str) -> bool:
        return await self._delete_by_id(product_id)
