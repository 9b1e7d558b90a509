"""Inventory commands."""

from .inventory_commands import (
    CreateInventoryCommand,
    CreateInventoryHandler,
    RestockInventoryCommand,
    RestockInventoryHandler,
)

__all__ = [
    "CreateInventoryCommand",
    "CreateInventoryHandler",
    "RestockInventoryCommand",
    "RestockInventoryHandler",
]
