"""Order confirmation: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier

from ordering.domain import ordering
from ordering.order.handler import load_order, notify_status_change, save_order
from ordering.order.order import Order

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class ConfirmOrder:
    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class ConfirmOrderHandler:
    @handle(ConfirmOrder)
    def confirm_order(self, command):
        order = load_order(command.order_id)
        previous_status = order.confirm()
        save_order(order)

        logger.info("Order confirmed", order_id=str(order.id))
        notify_status_change(order, previous_status)
