"""Fake notifier: records rendered messages for testing."""

from notifications.notifier.messages import render, status_update_type
from notifications.notifier.port import NotificationError, NotificationType, OrderNotifier
from ordering.order.order import Order, OrderStatus


class FakeNotifier(OrderNotifier):
    """Notifier that records messages in memory for test assertions."""

    def __init__(self):
        self.sent: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Notification delivery failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def sent_of_type(self, notification_type: NotificationType) -> list[dict]:
        return [m for m in self.sent if m["notification_type"] == notification_type.value]

    def _record(self, message: dict) -> None:
        if not self.should_succeed:
            raise NotificationError(self.failure_reason)
        self.sent.append(message)

    def send_order_confirmation(self, order: Order) -> None:
        self._record(render(NotificationType.ORDER_CONFIRMATION, order))

    def send_order_status_update(self, order: Order, previous_status: OrderStatus) -> None:
        self._record(
            render(
                status_update_type(order),
                order,
                previous_status=previous_status.value,
                amount=f"{order.total_price:.2f}",
            )
        )

    def send_shipping_notification(self, order: Order) -> None:
        self._record(render(NotificationType.SHIPPING_UPDATE, order))

    def send_delivery_notification(self, order: Order) -> None:
        self._record(render(NotificationType.DELIVERY_CONFIRMATION, order))

    def reset(self):
        """Clear sent messages (useful between tests)."""
        self.sent.clear()
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"
