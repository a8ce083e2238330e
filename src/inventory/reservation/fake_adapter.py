"""Configurable fake inventory for development and testing.

Tracks available and reserved quantities per (product, variant) in memory.
Reservation is all-or-nothing: if any entry cannot be satisfied, nothing is
held. Every call is recorded in ``calls`` for test assertions.
"""

from inventory.reservation.port import InventoryError, InventoryService, StockReservation


class FakeInventoryService(InventoryService):
    """In-memory inventory with failure switches."""

    def __init__(self) -> None:
        self.available: dict[tuple[str, str | None], int] = {}
        self.reserved: dict[tuple[str, str | None], int] = {}
        self.calls: list[dict] = []
        self.fail_validation = False
        self.fail_reservation = False
        self.fail_release = False
        self.failure_reason = "Inventory service unavailable"

    def configure(
        self,
        fail_validation: bool = False,
        fail_reservation: bool = False,
        fail_release: bool = False,
        failure_reason: str = "Inventory service unavailable",
    ) -> None:
        """Configure failure behavior at runtime."""
        self.fail_validation = fail_validation
        self.fail_reservation = fail_reservation
        self.fail_release = fail_release
        self.failure_reason = failure_reason

    def set_stock(self, product_id: str, quantity: int, variant_id: str | None = None) -> None:
        self.available[(product_id, variant_id)] = quantity

    def available_for(self, product_id: str, variant_id: str | None = None) -> int:
        return self.available.get((product_id, variant_id), 0)

    def reserved_for(self, product_id: str, variant_id: str | None = None) -> int:
        return self.reserved.get((product_id, variant_id), 0)

    def calls_to(self, method: str) -> list[dict]:
        return [call for call in self.calls if call["method"] == method]

    # -------------------------------------------------------------------
    # InventoryService
    # -------------------------------------------------------------------
    def validate_availability(
        self,
        product_id: str,
        variant_id: str | None,
        quantity: int,
    ) -> bool:
        self.calls.append(
            {
                "method": "validate_availability",
                "product_id": product_id,
                "variant_id": variant_id,
                "quantity": quantity,
            }
        )
        if self.fail_validation:
            raise InventoryError(self.failure_reason)

        return self.available_for(product_id, variant_id) >= quantity

    def reserve_stock(self, reservations: list[StockReservation]) -> None:
        self.calls.append({"method": "reserve_stock", "reservations": list(reservations)})
        if self.fail_reservation:
            raise InventoryError(self.failure_reason)

        requested: dict[tuple[str, str | None], int] = {}
        for reservation in reservations:
            key = (reservation.product_id, reservation.variant_id)
            requested[key] = requested.get(key, 0) + reservation.quantity

        for (product_id, variant_id), quantity in requested.items():
            if self.available_for(product_id, variant_id) < quantity:
                raise InventoryError(f"Insufficient stock for product {product_id}")

        for key, quantity in requested.items():
            self.available[key] = self.available.get(key, 0) - quantity
            self.reserved[key] = self.reserved.get(key, 0) + quantity

    def release_stock(self, reservations: list[StockReservation]) -> None:
        self.calls.append({"method": "release_stock", "reservations": list(reservations)})
        if self.fail_release:
            raise InventoryError(self.failure_reason)

        for reservation in reservations:
            key = (reservation.product_id, reservation.variant_id)
            released = min(self.reserved.get(key, 0), reservation.quantity)
            self.reserved[key] = self.reserved.get(key, 0) - released
            self.available[key] = self.available.get(key, 0) + released

    def reset(self) -> None:
        """Clear stock, reservations and recorded calls."""
        self.available.clear()
        self.reserved.clear()
        self.calls.clear()
        self.configure()
