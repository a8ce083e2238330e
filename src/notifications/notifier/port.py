"""Order notifier port (abstract interface).

Notifications are a side channel: callers treat every method as
fire-and-forget and only log failures.
"""

from abc import ABC, abstractmethod

from notifications.types import NotificationType
from ordering.order.order import Order, OrderStatus

__all__ = ["NotificationError", "NotificationType", "OrderNotifier"]


class NotificationError(Exception):
    """Raised by adapters when a message could not be handed off."""


class OrderNotifier(ABC):
    """Abstract interface for order notification adapters."""

    @abstractmethod
    def send_order_confirmation(self, order: Order) -> None: ...

    @abstractmethod
    def send_order_status_update(self, order: Order, previous_status: OrderStatus) -> None: ...

    @abstractmethod
    def send_shipping_notification(self, order: Order) -> None: ...

    @abstractmethod
    def send_delivery_notification(self, order: Order) -> None: ...
