"""Order commands."""

from .place_order import OrderLine, PlaceOrderCommand, PlaceOrderHandler
from .update_order_status import UpdateOrderStatusCommand, UpdateOrderStatusHandler
from .update_shipping_address import (
    UpdateShippingAddressCommand,
    UpdateShippingAddressHandler,
)
from .cancel_order import CancelOrderCommand, CancelOrderHandler

__all__ = [
    "OrderLine",
    "PlaceOrderCommand",
    "PlaceOrderHandler",
    "UpdateOrderStatusCommand",
    "UpdateOrderStatusHandler",
    "UpdateShippingAddressCommand",
    "UpdateShippingAddressHandler",
    "CancelOrderCommand",
    "CancelOrderHandler",
]
