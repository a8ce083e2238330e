"""Integration tests for order notifiers and message templates."""

from datetime import UTC, datetime

import pytest
from notifications.notifier import (
    NotificationError,
    NotificationType,
    get_notifier,
    reset_notifier,
    set_notifier,
)
from notifications.notifier.fake_adapter import FakeNotifier
from notifications.notifier.logging_adapter import LoggingNotifier
from notifications.notifier.messages import order_context, render, status_update_type
from notifications.notifier.null_adapter import NullNotifier
from notifications.templates import TEMPLATE_REGISTRY, get_template
from ordering.order.order import OrderStatus
from structlog.testing import capture_logs


@pytest.fixture()
def order(make_order):
    order = make_order()
    order.order_number = "ORD-20260118-ABC123"
    return order


class TestTemplates:
    def test_every_type_has_a_template(self):
        assert set(TEMPLATE_REGISTRY) == set(NotificationType)
        for notification_type, template in TEMPLATE_REGISTRY.items():
            assert template.notification_type == notification_type

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            get_template("carrier_pigeon")

    @pytest.mark.parametrize("notification_type", list(NotificationType))
    def test_templates_render_with_minimal_context(self, notification_type):
        message = get_template(notification_type).render({})
        assert message["subject"]
        assert message["body"]


class TestMessages:
    def test_context_uses_order_number(self, order):
        context = order_context(order)
        assert context["order_id"] == "ORD-20260118-ABC123"
        assert context["grand_total"] == "50.00"
        assert context["item_count"] == 2
        assert "tracking_number" not in context

    def test_context_includes_shipment_details(self, order):
        order.tracking_number = "1Z999"
        order.estimated_delivery = datetime(2026, 2, 1, 15, 0, tzinfo=UTC)

        context = order_context(order)

        assert context["tracking_number"] == "1Z999"
        assert context["estimated_delivery"] == "2026-02-01"

    @pytest.mark.parametrize(
        "status,expected",
        [
            (OrderStatus.CONFIRMED, NotificationType.ORDER_STATUS_UPDATE),
            (OrderStatus.CANCELLED, NotificationType.ORDER_CANCELLATION),
            (OrderStatus.REFUNDED, NotificationType.REFUND_NOTIFICATION),
        ],
    )
    def test_status_update_type(self, order, status, expected):
        order.status = status.value
        assert status_update_type(order) == expected

    def test_render_confirmation(self, order):
        message = render(NotificationType.ORDER_CONFIRMATION, order)
        assert message["notification_type"] == NotificationType.ORDER_CONFIRMATION.value
        assert message["order_id"] == str(order.id)
        assert "ORD-20260118-ABC123" in message["subject"] + message["body"]


class TestFakeNotifier:
    def test_records_messages(self, order):
        notifier = FakeNotifier()
        notifier.send_order_confirmation(order)
        notifier.send_shipping_notification(order)

        assert len(notifier.sent) == 2
        assert len(notifier.sent_of_type(NotificationType.SHIPPING_UPDATE)) == 1

    def test_status_update_mentions_previous_status(self, order):
        notifier = FakeNotifier()
        order.status = OrderStatus.CONFIRMED.value
        notifier.send_order_status_update(order, OrderStatus.PENDING)

        [message] = notifier.sent
        assert "from pending to confirmed" in message["body"]

    def test_failure_mode(self, order):
        notifier = FakeNotifier()
        notifier.configure(should_succeed=False, failure_reason="smtp down")

        with pytest.raises(NotificationError, match="smtp down"):
            notifier.send_delivery_notification(order)

        notifier.reset()
        notifier.send_delivery_notification(order)
        assert len(notifier.sent) == 1


class TestLoggingNotifier:
    def test_logs_rendered_subject(self, order):
        with capture_logs() as logs:
            LoggingNotifier().send_order_confirmation(order)

        [entry] = [e for e in logs if e["event"] == "Order notification"]
        assert entry["notification_type"] == NotificationType.ORDER_CONFIRMATION.value
        assert entry["order_id"] == str(order.id)
        assert entry["log_level"] == "info"


class TestRegistry:
    def test_defaults_to_logging_notifier(self):
        reset_notifier()
        assert isinstance(get_notifier(), LoggingNotifier)

    def test_null_notifier(self, order):
        set_notifier(NullNotifier())
        get_notifier().send_order_confirmation(order)
        assert isinstance(get_notifier(), NullNotifier)
