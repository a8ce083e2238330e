"""Order notifier factory.

Provides get_notifier() / set_notifier() to swap implementations:
- LoggingNotifier when no delivery channel is configured (default)
- FakeNotifier for automated tests
- NullNotifier to switch notifications off
"""

from notifications.notifier.logging_adapter import LoggingNotifier
from notifications.notifier.port import NotificationError, NotificationType, OrderNotifier

__all__ = [
    "NotificationError",
    "NotificationType",
    "OrderNotifier",
    "get_notifier",
    "reset_notifier",
    "set_notifier",
]

_current_notifier: OrderNotifier | None = None


def get_notifier() -> OrderNotifier:
    """Return the current notifier. Defaults to LoggingNotifier."""
    global _current_notifier
    if _current_notifier is None:
        _current_notifier = LoggingNotifier()
    return _current_notifier


def set_notifier(notifier: OrderNotifier) -> None:
    """Override the active notifier (useful for tests)."""
    global _current_notifier
    _current_notifier = notifier


def reset_notifier() -> None:
    """Reset to default notifier."""
    global _current_notifier
    _current_notifier = None
