"""Application tests for order cancellation and refund commands."""

from unittest.mock import patch

import pytest
from inventory.reservation import StockReservation
from notifications.notifier import NotificationType
from ordering.order.cancellation import CancelOrder, RefundOrder
from ordering.order.confirmation import ConfirmOrder
from ordering.order.exceptions import OrderNotCancellable, OrderNotRefundable, OrderUpdateFailed
from ordering.order.fulfillment import DeliverOrder, ProcessOrder, ShipOrder
from ordering.order.order import OrderStatus
from ordering.store import OrderStoreError
from protean import current_domain


def _process(*commands):
    for command in commands:
        current_domain.process(command, asynchronous=False)


def _ship(order_id):
    _process(ConfirmOrder(order_id=order_id), ProcessOrder(order_id=order_id), ShipOrder(order_id=order_id))


def _deliver(order_id):
    _ship(order_id)
    _process(DeliverOrder(order_id=order_id))


class TestCancelOrderCommand:
    @pytest.mark.parametrize("steps", [0, 1, 2])
    def test_cancel_from_cancellable_states(self, placed_order, store, steps):
        if steps >= 1:
            _process(ConfirmOrder(order_id=placed_order.id))
        if steps >= 2:
            _process(ProcessOrder(order_id=placed_order.id))

        _process(CancelOrder(order_id=placed_order.id, reason="Not needed"))

        stored = store.get_order_by_id(placed_order.id)
        assert stored.status == OrderStatus.CANCELLED.value
        assert stored.cancel_reason == "Not needed"
        assert stored.cancelled_at is not None

    def test_cancel_releases_stock_for_every_item(self, placed_order, inventory):
        _process(CancelOrder(order_id=placed_order.id, reason="Not needed"))

        [release] = inventory.calls_to("release_stock")
        assert release["reservations"] == [StockReservation(product_id="prod-001", quantity=2)]
        assert inventory.reserved_for("prod-001") == 0
        assert inventory.available_for("prod-001") == 10

    def test_release_failure_does_not_fail_cancellation(self, placed_order, inventory, store):
        inventory.configure(fail_release=True)

        _process(CancelOrder(order_id=placed_order.id, reason="Not needed"))

        assert store.get_order_by_id(placed_order.id).status == OrderStatus.CANCELLED.value
        assert len(inventory.calls_to("release_stock")) == 1

    def test_cancel_sends_cancellation_notice(self, placed_order, notifier):
        _process(CancelOrder(order_id=placed_order.id, reason="Found it cheaper"))

        [message] = notifier.sent_of_type(NotificationType.ORDER_CANCELLATION)
        assert "Found it cheaper" in message["body"]

    def test_shipped_order_cannot_be_cancelled(self, placed_order, inventory, store):
        _ship(placed_order.id)

        with pytest.raises(OrderNotCancellable):
            _process(CancelOrder(order_id=placed_order.id, reason="damaged"))

        assert store.get_order_by_id(placed_order.id).status == OrderStatus.SHIPPED.value
        assert inventory.calls_to("release_stock") == []

    def test_store_failure_skips_release(self, placed_order, inventory, store):
        with patch.object(store, "update_order", side_effect=OrderStoreError("db down")):
            with pytest.raises(OrderUpdateFailed):
                _process(CancelOrder(order_id=placed_order.id, reason="Not needed"))

        assert inventory.calls_to("release_stock") == []


class TestRefundOrderCommand:
    def test_refund_delivered_order(self, placed_order, store, inventory, notifier):
        _deliver(placed_order.id)

        _process(RefundOrder(order_id=placed_order.id, reason="Defective"))

        stored = store.get_order_by_id(placed_order.id)
        assert stored.status == OrderStatus.REFUNDED.value
        assert stored.cancel_reason == "Defective"
        assert inventory.calls_to("release_stock") == []

        [message] = notifier.sent_of_type(NotificationType.REFUND_NOTIFICATION)
        assert f"{placed_order.total_price:.2f}" in message["subject"]

    def test_refund_before_delivery_is_rejected(self, placed_order, store):
        with pytest.raises(OrderNotRefundable):
            _process(RefundOrder(order_id=placed_order.id, reason="Too early"))

        assert store.get_order_by_id(placed_order.id).status == OrderStatus.PENDING.value

    def test_refunded_order_is_terminal(self, placed_order):
        _deliver(placed_order.id)
        _process(RefundOrder(order_id=placed_order.id, reason="Defective"))

        with pytest.raises(OrderNotRefundable):
            _process(RefundOrder(order_id=placed_order.id, reason="Again"))
        with pytest.raises(OrderNotCancellable):
            _process(CancelOrder(order_id=placed_order.id, reason="Again"))
