"""Shared plumbing for order command handlers.

Every lifecycle operation follows the same shape: load the order, let the
aggregate validate and apply the change in memory, persist it, then run side
effects. Side effects after a successful save (stock release, notifications)
never fail the operation.
"""

import structlog
from notifications.notifier import get_notifier

from ordering.order.exceptions import OrderUpdateFailed
from ordering.order.order import Order, OrderStatus
from ordering.store import get_order_store

logger = structlog.get_logger(__name__)


def load_order(order_id: str) -> Order:
    """Raises OrderNotFound when the store has no such order."""
    return get_order_store().get_order_by_id(order_id)


def save_order(order: Order) -> None:
    try:
        get_order_store().update_order(order)
    except Exception as exc:
        logger.error("Failed to persist order", order_id=str(order.id), error=str(exc))
        raise OrderUpdateFailed(str(order.id)) from exc


def notify_status_change(order: Order, previous_status: OrderStatus) -> None:
    notify_best_effort(
        "status_update",
        order,
        lambda notifier: notifier.send_order_status_update(order, previous_status),
    )


def notify_best_effort(kind: str, order: Order, send) -> None:
    try:
        send(get_notifier())
    except Exception as exc:
        logger.warning(
            "Order notification failed",
            notification=kind,
            order_id=str(order.id),
            error=str(exc),
        )
