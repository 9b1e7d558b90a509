"""Update Shipping Address Command. Locked once the order has shipped."""

from dataclasses import dataclass
from logging import getLogger

from workhub.application.common.interfaces import Command, CommandHandler
from workhub.domain.entities.order import ADDRESS_LOCKED_STATUSES, Order
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    InvalidStateError,
)
from workhub.domain.ports.repositories import OrderRepository
from workhub.domain.value_objects.address import Address

logger = getLogger(__name__)


@dataclass(frozen=True)
class UpdateShippingAddressCommand(Command[Order]):
    order_id: str
    address: Address


class UpdateShippingAddressHandler(CommandHandler[Order]):
    def __init__(self, order_repository: OrderRepository):
        self._order_repository = order_repository

    async def execute(self, command: UpdateShippingAddressCommand) -> Order:
        if command.address is None or command.address.is_blank():
            raise DomainValidationError("Shipping address must not be blank")
        order = await self._order_repository.get_by_id(command.order_id)
        if not order:
            raise EntityNotFoundError.for_id("Order", command.order_id)
        if order.status in ADDRESS_LOCKED_STATUSES:
            raise InvalidStateError(
                f"Cannot change the shipping address of a {order.status.value} order"
            )

        order.change_shipping_address(command.address)
        await self._order_repository.save(order)
        logger.info("Order %s shipping address updated", order.order_number)
        return order
