"""Order completion: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier

from ordering.domain import ordering
from ordering.order.handler import load_order, notify_status_change, save_order
from ordering.order.order import Order

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class CompleteOrder:
    """Close a delivered order once nothing else is expected to happen to it."""

    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class CompleteOrderHandler:
    @handle(CompleteOrder)
    def complete_order(self, command):
        order = load_order(command.order_id)
        previous_status = order.complete()
        save_order(order)

        logger.info("Order completed", order_id=str(order.id))
        notify_status_change(order, previous_status)
