"""Order fulfillment: commands and handler.

Handles the fulfillment pipeline: processing, shipment and delivery.
"""

import structlog
from protean import handle
from protean.fields import DateTime, Identifier, String

from ordering.domain import ordering
from ordering.order.handler import load_order, notify_best_effort, notify_status_change, save_order
from ordering.order.order import Order

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class ProcessOrder:
    """Signal that the warehouse has started picking and packing."""

    order_id = Identifier(required=True)


@ordering.command(part_of="Order")
class ShipOrder:
    """Record that the order has been handed to the carrier."""

    order_id = Identifier(required=True)
    tracking_number = String(max_length=100)
    estimated_delivery = DateTime()


@ordering.command(part_of="Order")
class DeliverOrder:
    """Record that the carrier has confirmed delivery to the customer."""

    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class FulfillmentHandler:
    @handle(ProcessOrder)
    def process_order(self, command):
        order = load_order(command.order_id)
        previous_status = order.mark_processing()
        save_order(order)

        logger.info("Order processing started", order_id=str(order.id))
        notify_status_change(order, previous_status)

    @handle(ShipOrder)
    def ship_order(self, command):
        order = load_order(command.order_id)
        previous_status = order.record_shipment(
            tracking_number=command.tracking_number,
            estimated_delivery=command.estimated_delivery,
        )
        save_order(order)

        logger.info("Order shipped", order_id=str(order.id), tracking_number=order.tracking_number)
        notify_best_effort("shipping", order, lambda notifier: notifier.send_shipping_notification(order))
        notify_status_change(order, previous_status)

    @handle(DeliverOrder)
    def deliver_order(self, command):
        order = load_order(command.order_id)
        previous_status = order.record_delivery()
        save_order(order)

        logger.info("Order delivered", order_id=str(order.id))
        notify_best_effort("delivery", order, lambda notifier: notifier.send_delivery_notification(order))
        notify_status_change(order, previous_status)
