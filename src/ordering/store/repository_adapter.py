"""Order store backed by the domain's Order repository.

Every call goes through ``current_domain.repository_for(Order)``, so the
store persists wherever the active domain is configured to (the memory
provider by default). Each read returns a freshly loaded aggregate.

Updates are checked against the aggregate's ``_version``: saving an order
that someone else saved after it was loaded raises StaleOrderError.
"""

from datetime import UTC, datetime
from uuid import uuid4

import structlog
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.config import get_settings
from ordering.order.exceptions import OrderNotFound
from ordering.order.order import Order, OrderStatus, PaymentStatus
from ordering.order.repository import OrderRepository
from ordering.store.port import DuplicateOrderError, OrderStore, StaleOrderError

logger = structlog.get_logger(__name__)


def generate_order_number(prefix: str | None = None) -> str:
    """Human-readable order number, e.g. ``ORD-20260118-3FA9C2``."""
    prefix = prefix or get_settings().order_number_prefix
    return f"{prefix}-{datetime.now(UTC):%Y%m%d}-{uuid4().hex[:6].upper()}"


class RepositoryOrderStore(OrderStore):
    @property
    def repository(self) -> OrderRepository:
        return current_domain.repository_for(Order)

    # -------------------------------------------------------------------
    # CRUD
    # -------------------------------------------------------------------
    def create_order(self, order: Order) -> None:
        repo = self.repository

        if repo.exists(order.id):
            raise DuplicateOrderError(f"Order {order.id} already exists")

        if not order.order_number:
            order.order_number = self._unique_order_number(repo)
        elif repo.find_by_number(order.order_number) is not None:
            raise DuplicateOrderError(f"Order number {order.order_number} already exists")

        repo.add(order)
        logger.debug("Order stored", order_id=str(order.id), order_number=order.order_number)

    def get_order_by_id(self, order_id: str) -> Order:
        try:
            return self.repository.get(str(order_id))
        except ObjectNotFoundError:
            raise OrderNotFound(str(order_id)) from None

    def get_order_by_number(self, order_number: str) -> Order:
        order = self.repository.find_by_number(order_number)
        if order is None:
            raise OrderNotFound(order_number)
        return order

    def update_order(self, order: Order) -> None:
        stored = self.get_order_by_id(order.id)
        if stored._version != order._version:
            raise StaleOrderError(
                f"Order {order.id} was modified concurrently "
                f"(expected version {order._version}, found {stored._version})"
            )

        try:
            self.repository.add(order)
        except ExpectedVersionError as exc:
            raise StaleOrderError(str(exc)) from exc

    def delete_order(self, order_id: str) -> None:
        order = self.get_order_by_id(order_id)
        self.repository._dao.delete(order)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get_orders_by_user_id(self, user_id: str, limit: int, offset: int) -> tuple[list[Order], int]:
        return self.repository.find_by_user(user_id, limit, offset)

    def get_orders_by_status(self, status: OrderStatus, limit: int, offset: int) -> tuple[list[Order], int]:
        return self.repository.find_by_status(OrderStatus(status).value, limit, offset)

    def get_orders_by_payment_status(
        self,
        payment_status: PaymentStatus,
        limit: int,
        offset: int,
    ) -> tuple[list[Order], int]:
        return self.repository.find_by_payment_status(PaymentStatus(payment_status).value, limit, offset)

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    @staticmethod
    def _unique_order_number(repo: OrderRepository) -> str:
        number = generate_order_number()
        while repo.find_by_number(number) is not None:
            number = generate_order_number()
        return number
