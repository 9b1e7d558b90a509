"""
Update Order Status Command.

Inventory rules, applied before the status is stored:
- unchanged status              -> no-op
- -> CANCELLED                  -> release every line
- -> COMPLETED (not from SHIPPED) -> deduct every line
- PROCESSING -> SHIPPED         -> deduct every line

A SHIPPED -> COMPLETED move deducts nothing, stock already left on
shipment.
"""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.application.services.inventory_adjuster import InventoryAdjuster
from workhub.domain.entities.order import Order, OrderStatus
from workhub.domain.exceptions import EntityNotFoundError
from workhub.domain.ports.repositories import OrderRepository
from workhub.observability.metrics import increment_order_status_transition

logger = getLogger(__name__)


@dataclass(frozen=True)
class UpdateOrderStatusCommand(Command[Order]):
    order_id: str
    status: OrderStatus


class UpdateOrderStatusHandler(CommandHandler[Order]):
    def __init__(
        self,
        order_repository: OrderRepository,
        inventory_adjuster: InventoryAdjuster,
    ):
        self._order_repository = order_repository
        self._inventory_adjuster = inventory_adjuster

    async def execute(self, command: UpdateOrderStatusCommand) -> Order:
        order = await self._order_repository.get_by_id(command.order_id)
        if not order:
            raise EntityNotFoundError.for_id("Order", command.order_id)

        previous, new = order.status, command.status
        if previous == new:
            return order

        if new == OrderStatus.CANCELLED:
            await self._inventory_adjuster.release_all(order.items)
        elif new == OrderStatus.COMPLETED and previous != OrderStatus.SHIPPED:
            await self._inventory_adjuster.deduct_all(order.items)
        elif new == OrderStatus.SHIPPED and previous == OrderStatus.PROCESSING:
            await self._inventory_adjuster.deduct_all(order.items)

        order.change_status(new)
        await self._order_repository.save(order)
        increment_order_status_transition(previous.value, new.value)
        logger.info("Order %s status %s -> %s", order.order_number, previous.value, new.value)
        return order
