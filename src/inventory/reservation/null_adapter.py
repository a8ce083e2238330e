"""No-op inventory for deployments that do not track stock.

Everything is available and reservations are accepted without effect, so the
checkout saga runs the same steps whether or not inventory is tracked.
"""

from inventory.reservation.port import InventoryService, StockReservation


class NullInventoryService(InventoryService):
    def validate_availability(
        self,
        product_id: str,  # noqa: ARG002
        variant_id: str | None,  # noqa: ARG002
        quantity: int,  # noqa: ARG002
    ) -> bool:
        return True

    def reserve_stock(self, reservations: list[StockReservation]) -> None:  # noqa: ARG002
        return None

    def release_stock(self, reservations: list[StockReservation]) -> None:  # noqa: ARG002
        return None
