"""Order store port (abstract interface).

The store is the source of truth for orders once checkout has created them.
Adapters own persistence mechanics, including protection against concurrent
updates of the same order (row locks or optimistic versioning).
"""

from abc import ABC, abstractmethod

from ordering.order.order import Order, OrderStatus, PaymentStatus


class OrderStoreError(Exception):
    """Raised when the store cannot complete a write."""


class DuplicateOrderError(OrderStoreError):
    """An order with the same id or order number already exists."""


class StaleOrderError(OrderStoreError):
    """The order was changed by someone else since it was loaded."""


class OrderStore(ABC):
    """Abstract order persistence interface."""

    # -------------------------------------------------------------------
    # CRUD
    # -------------------------------------------------------------------
    @abstractmethod
    def create_order(self, order: Order) -> None:
        """Persist a new order, assigning ``order_number`` when it is missing."""
        ...

    @abstractmethod
    def get_order_by_id(self, order_id: str) -> Order:
        """Return a freshly loaded order. Raises OrderNotFound."""
        ...

    @abstractmethod
    def get_order_by_number(self, order_number: str) -> Order:
        """Return a freshly loaded order. Raises OrderNotFound."""
        ...

    @abstractmethod
    def update_order(self, order: Order) -> None:
        """Save changes to an existing order. Raises StaleOrderError on conflict."""
        ...

    @abstractmethod
    def delete_order(self, order_id: str) -> None:
        """Remove an order and its items (administrative use only)."""
        ...

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @abstractmethod
    def get_orders_by_user_id(self, user_id: str, limit: int, offset: int) -> tuple[list[Order], int]:
        """Return one page of a user's orders (newest first) and the total count."""
        ...

    @abstractmethod
    def get_orders_by_status(self, status: OrderStatus, limit: int, offset: int) -> tuple[list[Order], int]: ...

    @abstractmethod
    def get_orders_by_payment_status(
        self,
        payment_status: PaymentStatus,
        limit: int,
        offset: int,
    ) -> tuple[list[Order], int]: ...
