"""Notification kinds emitted by the ordering core."""

from enum import Enum


class NotificationType(Enum):
    ORDER_CONFIRMATION = "OrderConfirmation"
    ORDER_STATUS_UPDATE = "OrderStatusUpdate"
    ORDER_CANCELLATION = "OrderCancellation"
    REFUND_NOTIFICATION = "RefundNotification"
    SHIPPING_UPDATE = "ShippingUpdate"
    DELIVERY_CONFIRMATION = "DeliveryConfirmation"
