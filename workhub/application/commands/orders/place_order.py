"""
Place Order Command.

Steps:
1. User must exist
2. Every product must exist and have enough available stock
3. Build the order lines at the current product prices
4. Reserve stock line by line
5. Save the order as PENDING

Availability is checked for every line before anything is reserved.
The reservations themselves are separate writes.
"""

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.application.services.inventory_adjuster import InventoryAdjuster
from workhub.config.settings import Config
from workhub.domain.entities.order import Order, OrderItem
from workhub.domain.exceptions import DomainValidationError, EntityNotFoundError
from workhub.domain.ports.repositories import (
    OrderRepository,
    ProductRepository,
    UserRepository,
)
from workhub.domain.value_objects.address import Address

logger = getLogger(__name__)


@dataclass(frozen=True)
class OrderLine:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class PlaceOrderCommand(Command[Order]):
    user_id: str
    lines: tuple[OrderLine, ...]
    shipping_address: Optional[Address] = None
    notes: Optional[str] = None


class PlaceOrderHandler(CommandHandler[Order]):
    def __init__(
        self,
        order_repository: OrderRepository,
        user_repository: UserRepository,
        product_repository: ProductRepository,
        inventory_adjuster: InventoryAdjuster,
    ):
        self._order_repository = order_repository
        self._user_repository = user_repository
        self._product_repository = product_repository
        self._inventory_adjuster = inventory_adjuster

    async def execute(self, command: PlaceOrderCommand) -> Order:
        if not command.lines:
            raise DomainValidationError("Order must contain at least one item")
        if not await self._user_repository.exists_by_id(command.user_id):
            raise EntityNotFoundError.for_id("User", command.user_id)

        items: list[OrderItem] = []
        for line in command.lines:
            if line.quantity <= 0:
                raise DomainValidationError("Order quantity must be positive")
            product = await self._product_repository.get_by_id(line.product_id)
            if not product:
                raise EntityNotFoundError.for_id("Product", line.product_id)
            await self._inventory_adjuster.ensure_available(
                product.id, product.name, line.quantity
            )
            items.append(
                OrderItem(
                    product_id=product.id,
                    sku=product.sku,
                    name=product.name,
                    quantity=line.quantity,
                    unit_price=product.price,
                )
            )

        await self._inventory_adjuster.reserve_all(items)

        order = Order.place(
            user_id=command.user_id,
            items=items,
            shipping_address=command.shipping_address,
            notes=command.notes,
            currency=Config.DEFAULT_CURRENCY,
        )
        await self._order_repository.save(order)
        logger.info(
            "Placed order %s for user %s, total %s", order.order_number, order.user_id, order.total
        )
        return order
