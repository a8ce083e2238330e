"""Order confirmation template — sent when checkout creates an order."""

from notifications.types import NotificationType


class OrderConfirmationTemplate:
    notification_type = NotificationType.ORDER_CONFIRMATION

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        grand_total = context.get("grand_total", "0.00")
        currency = context.get("currency", "USD")
        item_count = context.get("item_count", 0)
        return {
            "subject": f"We received order #{order_id}",
            "body": (
                f"Order #{order_id} is placed and waiting for confirmation.\n\n"
                f"Items: {item_count}\n"
                f"Total: {currency} {grand_total}\n\n"
                "Stock for every item is held for you; we'll write again once it ships."
            ),
        }
