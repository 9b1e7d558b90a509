"""
Product Entity - A sellable catalogue item identified by SKU.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional
from uuid import uuid4


@dataclass
class Product:
    id: str
    sku: str
    name: str
    price: Decimal
    category: str
    created_at: datetime
    updated_at: datetime
    currency: str = "USD"
    description: Optional[str] = None
    subcategory: Optional[str] = None
    attributes: dict[str, Any] = field(default_factory=dict)
    images: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    weight: Optional[float] = None
    active: bool = True
    featured: bool = False

    def __post_init__(self):
        if self.price < 0:
            raise ValueError("Price must not be negative")

    @classmethod
    def create(
        cls,
        sku: str,
        name: str,
        price: Decimal,
        category: str,
        currency: str = "USD",
        description: Optional[str] = None,
        subcategory: Optional[str] = None,
        attributes: Optional[dict[str, Any]] = None,
        images: Optional[list[str]] = None,
        tags: Optional[list[str]] = None,
        weight: Optional[float] = None,
        featured: bool = False,
    ) -> Product:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid4()),
            sku=sku,
            name=name,
            price=price,
            category=category,
            created_at=now,
            updated_at=now,
            currency=currency,
            description=description,
            subcategory=subcategory,
            attributes=dict(attributes or {}),
            images=list(images or []),
            tags=list(tags or []),
            weight=weight,
            featured=featured,
        )

    def change_price(self, price: Decimal) -> None:
        if price < 0:
            raise ValueError("Price must not be negative")
        self.price = price
        self.touch()

    def merge_attributes(self, attributes: dict[str, Any]) -> None:
        self.attributes = {**self.attributes, **attributes}
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
