"""Build rendered messages for an order from the template registry."""

from notifications.templates import get_template
from notifications.types import NotificationType
from ordering.order.order import Order, OrderStatus


def order_context(order: Order, **extra) -> dict:
    """Template context shared by every order message."""
    context = {
        "order_id": order.order_number or str(order.id),
        "user_id": str(order.user_id),
        "status": OrderStatus(order.status).value,
        "grand_total": f"{order.total_price:.2f}",
        "currency": order.currency,
        "item_count": order.item_count,
    }
    if order.tracking_number:
        context["tracking_number"] = order.tracking_number
    if order.estimated_delivery:
        context["estimated_delivery"] = order.estimated_delivery.date().isoformat()
    if order.cancel_reason:
        context["reason"] = order.cancel_reason
    context.update(extra)
    return context


def status_update_type(order: Order) -> NotificationType:
    """Cancellations and refunds get their own wording."""
    if order.status == OrderStatus.CANCELLED:
        return NotificationType.ORDER_CANCELLATION
    if order.status == OrderStatus.REFUNDED:
        return NotificationType.REFUND_NOTIFICATION
    return NotificationType.ORDER_STATUS_UPDATE


def render(notification_type: NotificationType, order: Order, **extra) -> dict:
    template = get_template(notification_type)
    message = template.render(order_context(order, **extra))
    return {
        "notification_type": notification_type.value,
        "order_id": str(order.id),
        "user_id": str(order.user_id),
        **message,
    }
