"""Order payment status: commands and handler.

Payment status moves independently of the order status state machine.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String

from ordering.domain import ordering
from ordering.order.handler import load_order, save_order
from ordering.order.order import Order, PaymentStatus

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class UpdatePaymentStatus:
    order_id = Identifier(required=True)
    payment_status = String(required=True, choices=PaymentStatus)
    transaction_id = String(max_length=100)


@ordering.command(part_of="Order")
class ProcessPayment:
    """Mark the order as paid.

    Only the outcome is recorded: no payment provider is charged, and the
    order's status is left alone. Charging belongs to a payments integration
    that reports back through UpdatePaymentStatus.
    """

    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class PaymentHandler:
    @handle(UpdatePaymentStatus)
    def update_payment_status(self, command):
        self._record(command.order_id, command.payment_status, command.transaction_id)

    @handle(ProcessPayment)
    def process_payment(self, command):
        self._record(command.order_id, PaymentStatus.COMPLETED)

    def _record(self, order_id, payment_status, transaction_id=None):
        order = load_order(order_id)
        order.update_payment_status(payment_status, transaction_id)
        save_order(order)

        logger.info(
            "Order payment status updated",
            order_id=str(order.id),
            payment_status=order.payment_status,
        )
