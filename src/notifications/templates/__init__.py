"""Template registry — maps NotificationType to template classes.

Each template knows how to render a subject and body from a context dict
built out of the order.
"""

from notifications.templates.delivery_confirmation import (
    DeliveryConfirmationTemplate,
)
from notifications.templates.order_cancellation import OrderCancellationTemplate
from notifications.templates.order_confirmation import OrderConfirmationTemplate
from notifications.templates.order_status_update import OrderStatusUpdateTemplate
from notifications.templates.refund_notification import RefundNotificationTemplate
from notifications.templates.shipping_update import ShippingUpdateTemplate
from notifications.types import NotificationType

TEMPLATE_REGISTRY: dict[NotificationType, type] = {
    NotificationType.ORDER_CONFIRMATION: OrderConfirmationTemplate,
    NotificationType.ORDER_STATUS_UPDATE: OrderStatusUpdateTemplate,
    NotificationType.ORDER_CANCELLATION: OrderCancellationTemplate,
    NotificationType.REFUND_NOTIFICATION: RefundNotificationTemplate,
    NotificationType.SHIPPING_UPDATE: ShippingUpdateTemplate,
    NotificationType.DELIVERY_CONFIRMATION: DeliveryConfirmationTemplate,
}


def get_template(notification_type: NotificationType):
    """Look up a template class by notification type."""
    template_cls = TEMPLATE_REGISTRY.get(notification_type)
    if template_cls is None:
        raise ValueError(f"No template registered for notification type: {notification_type}")
    return template_cls
