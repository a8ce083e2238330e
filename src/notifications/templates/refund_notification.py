"""Refund notification template — sent when a delivered order is refunded."""

from notifications.types import NotificationType


class RefundNotificationTemplate:
    notification_type = NotificationType.REFUND_NOTIFICATION

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        amount = context.get("amount") or context.get("grand_total", "0.00")
        currency = context.get("currency", "USD")
        reason = context.get("reason") or "no reason given"
        return {
            "subject": f"Refund for order #{order_id}: {currency} {amount}",
            "body": (
                f"Order #{order_id} has been refunded ({reason}).\n\n"
                f"Amount: {currency} {amount}\n"
                "Your bank may take a few business days to show the credit."
            ),
        }
