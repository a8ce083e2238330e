"""Domain errors raised by the ordering context.

Every error carries a stable ``code`` so callers can map failures to distinct
user-facing reasons without parsing messages.
"""


class OrderingError(Exception):
    """Base class for all ordering errors."""

    code = "ordering_error"

    def __init__(self, message: str | None = None):
        self.message = message or self.__class__.__doc__ or self.code
        super().__init__(self.message)


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------
class InvalidOrderData(OrderingError):
    """Invalid order data."""

    code = "invalid_order_data"


class EmptyCart(InvalidOrderData):
    """Cannot create an order from an empty cart."""

    code = "empty_cart"

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Cart for user {user_id} has no items")


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------
class OrderNotFound(OrderingError):
    code = "order_not_found"

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


# ---------------------------------------------------------------------------
# State errors
# ---------------------------------------------------------------------------
class InvalidStatusTransition(OrderingError):
    code = "invalid_status_transition"

    def __init__(self, current, target):
        self.current = current
        self.target = target
        super().__init__(f"Cannot transition from {current.value} to {target.value}")


class _OrderStateError(OrderingError):
    reason = "in this state"

    def __init__(self, order_id: str, status):
        self.order_id = order_id
        self.status = status
        super().__init__(f"Order {order_id} {self.reason} (status: {status.value})")


class OrderNotEditable(_OrderStateError):
    code = "order_not_editable"
    reason = "is not editable"


class OrderNotCancellable(_OrderStateError):
    code = "order_not_cancellable"
    reason = "cannot be cancelled"


class OrderNotRefundable(_OrderStateError):
    code = "order_not_refundable"
    reason = "is not refundable"


# ---------------------------------------------------------------------------
# Collaborator errors
# ---------------------------------------------------------------------------
class CartUnavailable(OrderingError):
    code = "cart_unavailable"

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Failed to get cart for user {user_id}")


class InventoryCheckFailed(OrderingError):
    code = "inventory_check_failed"

    def __init__(self, sku: str):
        self.sku = sku
        super().__init__(f"Failed to validate availability of product {sku}")


class ProductUnavailable(OrderingError):
    code = "product_unavailable"

    def __init__(self, sku: str):
        self.sku = sku
        super().__init__(f"Product {sku} is not available in requested quantity")


class StockReservationFailed(OrderingError):
    """Failed to reserve stock."""

    code = "stock_reservation_failed"


class OrderCreationFailed(OrderingError):
    """Failed to create order."""

    code = "order_creation_failed"


class OrderUpdateFailed(OrderingError):
    code = "order_update_failed"

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Failed to update order {order_id}")
