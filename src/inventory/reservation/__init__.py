"""Inventory service factory.

Provides get_inventory() / set_inventory() to swap implementations:
- NullInventoryService when stock is not tracked (default)
- FakeInventoryService for development and testing
"""

from inventory.reservation.null_adapter import NullInventoryService
from inventory.reservation.port import InventoryError, InventoryService, StockReservation

__all__ = [
    "InventoryError",
    "InventoryService",
    "StockReservation",
    "get_inventory",
    "reset_inventory",
    "set_inventory",
]

_current_inventory: InventoryService | None = None


def get_inventory() -> InventoryService:
    """Return the current inventory service. Defaults to NullInventoryService."""
    global _current_inventory
    if _current_inventory is None:
        _current_inventory = NullInventoryService()
    return _current_inventory


def set_inventory(inventory: InventoryService) -> None:
    """Override the active inventory service (useful for tests)."""
    global _current_inventory
    _current_inventory = inventory


def reset_inventory() -> None:
    """Reset to default inventory service."""
    global _current_inventory
    _current_inventory = None
