"""Order status update template — sent on every lifecycle transition."""

from notifications.types import NotificationType


class OrderStatusUpdateTemplate:
    notification_type = NotificationType.ORDER_STATUS_UPDATE

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        status = context.get("status", "updated")
        previous_status = context.get("previous_status")
        change = f"from {previous_status} to {status}" if previous_status else f"to {status}"
        return {
            "subject": f"Order #{order_id} is now {status}",
            "body": (
                f"The status of your order #{order_id} changed {change}.\n\n"
                "You can follow your order from your account page."
            ),
        }
