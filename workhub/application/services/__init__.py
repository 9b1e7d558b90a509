"""Application services shared by several handlers."""

from .inventory_adjuster import InventoryAdjuster

__all__ = ["InventoryAdjuster"]
