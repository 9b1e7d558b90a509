"""
Inventory Entity - Stock counters for one product.

available = quantity - reserved. Orders reserve stock when placed, release it
when cancelled and deduct it when shipped or completed. Adjustments are applied
unconditionally, with no check of what was reserved before.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Inventory:
    id: str
    product_id: str
    sku: str
    quantity: int
    reserved: int
    low_stock_threshold: int
    updated_at: datetime

    @classmethod
    def create(
        cls, product_id: str, sku: str, quantity: int = 0, low_stock_threshold: int = 5
    ) -> Inventory:
        if quantity < 0:
            raise ValueError("Quantity must not be negative")
        return cls(
            id=str(uuid4()),
            product_id=product_id,
            sku=sku,
            quantity=quantity,
            reserved=0,
            low_stock_threshold=low_stock_threshold,
            updated_at=datetime.now(timezone.utc),
        )

    @property
    def available(self) -> int:
        return self.quantity - self.reserved

    @property
    def is_low_stock(self) -> bool:
        return self.available <= self.low_stock_threshold

    def is_available(self, quantity: int) -> bool:
        return self.available >= quantity

    def restock(self, quantity: int) -> None:
        self.quantity += quantity
        self.touch()

    def reserve(self, quantity: int) -> None:
        self.reserved += quantity
        self.touch()

    def release(self, quantity: int) -> None:
        self.reserved = max(0, self.reserved - quantity)
        self.touch()

    def deduct(self, quantity: int) -> None:
        self.quantity -= quantity
        self.reserved -= min(self.reserved, quantity)
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
