"""Inventory queries."""

from .inventory_queries import (
    GetInventoryHandler,
    GetInventoryQuery,
    ListLowStockHandler,
    ListLowStockQuery,
)

__all__ = [
    "GetInventoryHandler",
    "GetInventoryQuery",
    "ListLowStockHandler",
    "ListLowStockQuery",
]
