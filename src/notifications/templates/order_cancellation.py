"""Order cancellation template — sent when an order is cancelled before shipment."""

from notifications.types import NotificationType


class OrderCancellationTemplate:
    notification_type = NotificationType.ORDER_CANCELLATION

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        reason = context.get("reason") or "no reason given"
        previous_status = context.get("previous_status")
        lines = [f"Order #{order_id} was cancelled ({reason})."]
        if previous_status:
            lines.append(f"It was {previous_status} at the time of cancellation, so nothing will ship.")
        lines.append("Any payment taken for this order will be returned to the original payment method.")
        return {
            "subject": f"Order #{order_id} cancelled",
            "body": "\n\n".join(lines),
        }
