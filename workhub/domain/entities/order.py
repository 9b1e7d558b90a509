"""
Order Entity - A customer order with line items and a status lifecycle.
"""

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

from workhub.domain.value_objects.address import Address


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# Shipping address is frozen once the order left the warehouse
ADDRESS_LOCKED_STATUSES = (OrderStatus.SHIPPED, OrderStatus.DELIVERED)
NOT_CANCELLABLE_STATUSES = (
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
    OrderStatus.COMPLETED,
)
# Counted as money actually spent in the user summary
FULFILLED_STATUSES = (OrderStatus.COMPLETED, OrderStatus.DELIVERED)


@dataclass(frozen=True)
class OrderItem:
    product_id: str
    sku: str
    name: str
    quantity: int
    unit_price: Decimal

    def __post_init__(self):
        if self.quantity <= 0:
            raise ValueError("Quantity must be positive")

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


def generate_order_number(now: Optional[datetime] = None) -> str:
    """ORD-YYYYMMDD-XXXX with four upper-case characters taken from a UUID."""
    now = now or datetime.now(timezone.utc)
    suffix = uuid.uuid4().hex[:4].upper()
    return f"ORD-{now:%Y%m%d}-{suffix}"


@dataclass
class Order:
    id: str
    order_number: str
    user_id: str
    items: list[OrderItem]
    status: OrderStatus
    created_at: datetime
    updated_at: datetime
    currency: str = "USD"
    shipping_address: Optional[Address] = None
    notes: Optional[str] = None
    shipped_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    total: Decimal = field(init=False)

    def __post_init__(self):
        self.total = sum((item.subtotal for item in self.items), Decimal("0"))

    @classmethod
    def place(
        cls,
        user_id: str,
        items: list[OrderItem],
        shipping_address: Optional[Address] = None,
        notes: Optional[str] = None,
        currency: str = "USD",
    ) -> Order:
        now = datetime.now(timezone.utc)
        return cls(
            id=str(uuid.uuid4()),
            order_number=generate_order_number(now),
            user_id=user_id,
            items=list(items),
            status=OrderStatus.PENDING,
            created_at=now,
            updated_at=now,
            currency=currency,
            shipping_address=shipping_address,
            notes=notes,
        )

    def change_status(self, status: OrderStatus) -> None:
        now = datetime.now(timezone.utc)
        self.status = status
        if status == OrderStatus.SHIPPED:
            self.shipped_at = now
        elif status == OrderStatus.DELIVERED:
            self.delivered_at = now
        elif status == OrderStatus.CANCELLED:
            self.cancelled_at = now
        self.updated_at = now

    def change_shipping_address(self, address: Address) -> None:
        self.shipping_address = address
        self.updated_at = datetime.now(timezone.utc)
