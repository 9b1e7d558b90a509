"""Cancel Order Command. Shipped, delivered and completed orders cannot be cancelled."""

from dataclasses import dataclass

from workhub.application.commands.orders.update_order_status import (
    UpdateOrderStatusCommand,
    UpdateOrderStatusHandler,
)
from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.order import NOT_CANCELLABLE_STATUSES, Order, OrderStatus
from workhub.domain.exceptions import EntityNotFoundError, InvalidStateError
from workhub.domain.ports.repositories import OrderRepository


@dataclass(frozen=True)
class CancelOrderCommand(Command[Order]):
    order_id: str


class CancelOrderHandler(CommandHandler[Order]):
    def __init__(
        self,
        order_repository: OrderRepository,
        update_order_status_handler: UpdateOrderStatusHandler,
    ):
        self._order_repository = order_repository
        self._update_order_status_handler = update_order_status_handler

    async def execute(self, command: CancelOrderCommand) -> Order:
        order = await self._order_repository.get_by_id(command.order_id)
        if not order:
            raise EntityNotFoundError.for_id("Order", command.order_id)
        if order.status in NOT_CANCELLABLE_STATUSES:
            raise InvalidStateError(f"Cannot cancel a {order.status.value} order")
        return await self._update_order_status_handler.execute(
            UpdateOrderStatusCommand(order_id=order.id, status=OrderStatus.CANCELLED)
        )
