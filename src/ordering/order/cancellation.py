"""Order cancellation and refund: commands and handler.

Cancellation gives reserved stock back to inventory once the order is saved;
a failed release is logged and left for reconciliation because the order is
already cancelled. Refunds happen after delivery, so no stock is released.
"""

import structlog
from inventory.reservation import get_inventory
from protean import handle
from protean.fields import Identifier, String

from ordering.domain import ordering
from ordering.order.handler import load_order, notify_status_change, save_order
from ordering.order.order import Order

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)
    reason = String(max_length=500)


@ordering.command(part_of="Order")
class RefundOrder:
    order_id = Identifier(required=True)
    reason = String(max_length=500)


@ordering.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        order = load_order(command.order_id)
        previous_status = order.cancel(reason=command.reason or "")
        save_order(order)

        logger.info("Order cancelled", order_id=str(order.id), reason=command.reason)

        try:
            get_inventory().release_stock(order.stock_reservations())
        except Exception as exc:
            logger.warning(
                "Failed to release stock for cancelled order",
                order_id=str(order.id),
                error=str(exc),
            )

        notify_status_change(order, previous_status)

    @handle(RefundOrder)
    def refund_order(self, command):
        order = load_order(command.order_id)
        previous_status = order.refund(reason=command.reason or "")
        save_order(order)

        logger.info("Order refunded", order_id=str(order.id), reason=command.reason)
        notify_status_change(order, previous_status)
