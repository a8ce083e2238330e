"""Shipping update template — sent when the order is handed to the carrier."""

from notifications.types import NotificationType


class ShippingUpdateTemplate:
    notification_type = NotificationType.SHIPPING_UPDATE

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        tracking_number = context.get("tracking_number")
        estimated_delivery = context.get("estimated_delivery")

        lines = [f"Order #{order_id} is on its way."]
        lines.append(f"Tracking number: {tracking_number}" if tracking_number else "Tracking details will follow.")
        if estimated_delivery:
            lines.append(f"Expected by: {estimated_delivery}")
        return {
            "subject": f"Order #{order_id} shipped",
            "body": "\n".join(lines),
        }
