"""Inventory reservation port (abstract interface).

Defines the contract the checkout saga and order lifecycle use to check
availability and to hold or return stock. Inventory systems reconcile
quantities, not reservation objects, so a reservation has no identity.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class InventoryError(Exception):
    """Raised by adapters when the inventory system fails or refuses a request."""


@dataclass(frozen=True)
class StockReservation:
    """A provisional hold on a quantity of one product (and optional variant)."""

    product_id: str
    quantity: int
    variant_id: str | None = None


class InventoryService(ABC):
    """Abstract inventory interface."""

    @abstractmethod
    def validate_availability(
        self,
        product_id: str,
        variant_id: str | None,
        quantity: int,
    ) -> bool:
        """Return True if ``quantity`` units can currently be reserved."""
        ...

    @abstractmethod
    def reserve_stock(self, reservations: list[StockReservation]) -> None:
        """Reserve every entry, or none of them."""
        ...

    @abstractmethod
    def release_stock(self, reservations: list[StockReservation]) -> None:
        """Return previously reserved quantities to available stock."""
        ...
