"""Order queries."""

from .order_queries import (
    GetOrderHandler,
    GetOrderQuery,
    ListOrdersHandler,
    ListOrdersQuery,
    OrderSummary,
    UserOrderSummaryHandler,
    UserOrderSummaryQuery,
)

__all__ = [
    "GetOrderHandler",
    "GetOrderQuery",
    "ListOrdersHandler",
    "ListOrdersQuery",
    "OrderSummary",
    "UserOrderSummaryHandler",
    "UserOrderSummaryQuery",
]
