"""Delivery confirmation template — sent when the carrier confirms delivery."""

from notifications.types import NotificationType


class DeliveryConfirmationTemplate:
    notification_type = NotificationType.DELIVERY_CONFIRMATION

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        item_count = context.get("item_count", 0)
        lines = [f"All {item_count} item(s) in order #{order_id} were delivered."]
        if context.get("tracking_number"):
            lines.append(f"Tracking number for your records: {context['tracking_number']}")
        lines.append("Something wrong with the delivery? Reply to this message within 30 days.")
        return {
            "subject": f"Order #{order_id} delivered",
            "body": "\n\n".join(lines),
        }
