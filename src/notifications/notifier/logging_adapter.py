"""Logging notifier: renders messages and writes them to the log.

Used when no delivery channel is configured, so every notification the
ordering core emits is still visible.
"""

import structlog

from notifications.notifier.messages import render, status_update_type
from notifications.notifier.port import NotificationType, OrderNotifier
from ordering.order.order import Order, OrderStatus

logger = structlog.get_logger(__name__)


class LoggingNotifier(OrderNotifier):
    def _emit(self, message: dict) -> None:
        logger.info(
            "Order notification",
            notification_type=message["notification_type"],
            order_id=message["order_id"],
            user_id=message["user_id"],
            subject=message["subject"],
        )

    def send_order_confirmation(self, order: Order) -> None:
        self._emit(render(NotificationType.ORDER_CONFIRMATION, order))

    def send_order_status_update(self, order: Order, previous_status: OrderStatus) -> None:
        self._emit(
            render(
                status_update_type(order),
                order,
                previous_status=previous_status.value,
                amount=f"{order.total_price:.2f}",
            )
        )

    def send_shipping_notification(self, order: Order) -> None:
        self._emit(render(NotificationType.SHIPPING_UPDATE, order))

    def send_delivery_notification(self, order: Order) -> None:
        self._emit(render(NotificationType.DELIVERY_CONFIRMATION, order))
