"""Read-side access to orders.

Thin layer over the order store that applies paging rules. Each result is a
freshly loaded aggregate, so callers may inspect it freely without affecting
stored orders.
"""

from ordering.config import get_settings
from ordering.order.order import Order, OrderStatus, OrderSummary, PaymentStatus
from ordering.store import OrderStore, get_order_store


def _paging(page: int, limit: int | None) -> tuple[int, int]:
    """Translate a 1-based page and requested size into (limit, offset)."""
    settings = get_settings()
    limit = settings.default_page_size if limit is None else limit
    limit = max(1, min(limit, settings.max_page_size))
    page = max(1, page)
    return limit, (page - 1) * limit


class OrderQueries:
    def __init__(self, store: OrderStore | None = None):
        self.store = store or get_order_store()

    def get_order(self, order_id: str) -> Order:
        return self.store.get_order_by_id(order_id)

    def get_order_by_number(self, order_number: str) -> Order:
        return self.store.get_order_by_number(order_number)

    def get_user_orders(self, user_id: str, page: int = 1, limit: int | None = None) -> tuple[list[Order], int]:
        """Return one page of the user's orders, newest first, plus the total count."""
        limit, offset = _paging(page, limit)
        return self.store.get_orders_by_user_id(user_id, limit, offset)

    def get_user_order_summaries(
        self,
        user_id: str,
        page: int = 1,
        limit: int | None = None,
    ) -> tuple[list[OrderSummary], int]:
        orders, total = self.get_user_orders(user_id, page, limit)
        return [order.to_summary() for order in orders], total

    def get_orders_by_status(
        self,
        status: OrderStatus,
        page: int = 1,
        limit: int | None = None,
    ) -> tuple[list[Order], int]:
        limit, offset = _paging(page, limit)
        return self.store.get_orders_by_status(OrderStatus(status), limit, offset)

    def get_orders_by_payment_status(
        self,
        payment_status: PaymentStatus,
        page: int = 1,
        limit: int | None = None,
    ) -> tuple[list[Order], int]:
        limit, offset = _paging(page, limit)
        return self.store.get_orders_by_payment_status(PaymentStatus(payment_status), limit, offset)
