"""Notifier that drops every message."""

from notifications.notifier.port import OrderNotifier
from ordering.order.order import Order, OrderStatus


class NullNotifier(OrderNotifier):
    def send_order_confirmation(self, order: Order) -> None:  # noqa: ARG002
        return None

    def send_order_status_update(self, order: Order, previous_status: OrderStatus) -> None:  # noqa: ARG002
        return None

    def send_shipping_notification(self, order: Order) -> None:  # noqa: ARG002
        return None

    def send_delivery_notification(self, order: Order) -> None:  # noqa: ARG002
        return None
