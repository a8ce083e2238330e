"""Order aggregate (CQRS): the core of the ordering domain.

An Order is created only by the checkout saga, from non-empty cart contents,
and afterwards changes only through the lifecycle transitions below or a few
narrow edits gated by editability. Transitions are in-memory mutations;
persistence and side effects belong to the command handlers.

State Machine (8 states):
    PENDING → CONFIRMED → PROCESSING → SHIPPED → DELIVERED → COMPLETED
    DELIVERED/COMPLETED → REFUNDED
    CANCELLED (from PENDING, CONFIRMED, PROCESSING, SHIPPED)
    CANCELLED and REFUNDED are terminal.

Derived amounts (item count, subtotal, total) are computed from the current
items on every read and are never accepted from input.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from inventory.reservation.port import StockReservation
from protean.fields import (
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    Text,
    ValueObject,
)

from ordering.domain import ordering
from ordering.order.exceptions import (
    InvalidOrderData,
    InvalidStatusTransition,
    OrderNotCancellable,
    OrderNotEditable,
    OrderNotRefundable,
)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


# State machine transition map
VALID_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset({OrderStatus.COMPLETED, OrderStatus.REFUNDED}),
    OrderStatus.COMPLETED: frozenset({OrderStatus.REFUNDED}),
    OrderStatus.CANCELLED: frozenset(),  # Terminal
    OrderStatus.REFUNDED: frozenset(),  # Terminal
}

_EDITABLE_STATES = frozenset({OrderStatus.PENDING, OrderStatus.CONFIRMED})

_CANCELLABLE_STATES = frozenset(
    {
        OrderStatus.PENDING,
        OrderStatus.CONFIRMED,
        OrderStatus.PROCESSING,
    }
)

_REFUNDABLE_STATES = frozenset({OrderStatus.DELIVERED, OrderStatus.COMPLETED})

# Statuses that record when they were reached
_STATUS_TIMESTAMPS = {
    OrderStatus.CONFIRMED: "confirmed_at",
    OrderStatus.SHIPPED: "shipped_at",
    OrderStatus.DELIVERED: "delivered_at",
    OrderStatus.COMPLETED: "completed_at",
    OrderStatus.CANCELLED: "cancelled_at",
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class Address:
    """A delivery or billing address captured at checkout time.

    Once recorded on an Order, the address is a snapshot: later changes to the
    customer's address book do not affect it.
    """

    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    company = String(max_length=100)
    address_line_1 = String(required=True, max_length=255)
    address_line_2 = String(max_length=255)
    city = String(required=True, max_length=100)
    state_province = String(required=True, max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(max_length=100, default="US")
    phone = String(max_length=20)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """A line item in an order.

    Product display fields are copied from the cart when the order is created
    and never re-read from the catalogue.
    """

    product_id = Identifier(required=True)
    variant_id = Identifier()
    product_name = String(required=True, max_length=255)
    product_sku = String(required=True, max_length=100)
    variant_name = String(max_length=255)
    size = String(max_length=20)
    color = String(max_length=50)
    image_url = Text()
    unit_price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    discount = Float(default=0.0, min_value=0.0)
    created_at = DateTime()

    @property
    def total_price(self) -> float:
        return round(self.unit_price * self.quantity - (self.discount or 0.0), 2)

    def to_reservation(self) -> StockReservation:
        return StockReservation(
            product_id=str(self.product_id),
            variant_id=str(self.variant_id) if self.variant_id else None,
            quantity=self.quantity,
        )


@dataclass(frozen=True)
class OrderSummary:
    """Compact view of an order for listings."""

    id: str
    order_number: str | None
    status: OrderStatus
    payment_status: PaymentStatus
    item_count: int
    total_price: float
    created_at: datetime
    estimated_delivery: datetime | None = None


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    order_number = String(max_length=50)
    user_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)

    # Items and pricing
    items = HasMany(OrderItem)
    tax_amount = Float(default=0.0, min_value=0.0)
    shipping_cost = Float(default=0.0, min_value=0.0)
    discount_amount = Float(default=0.0, min_value=0.0)
    currency = String(max_length=3, default="USD")

    # Addresses
    shipping_address = ValueObject(Address, required=True)
    billing_address = ValueObject(Address, required=True)

    # Shipping and tracking
    shipping_method = String(max_length=100, default="standard")
    tracking_number = String(max_length=100)
    estimated_delivery = DateTime()
    actual_delivery = DateTime()

    # Payment
    payment_method_id = Identifier()
    transaction_id = String(max_length=100)

    # Metadata
    notes = Text()
    cancel_reason = Text()

    # Timestamps
    created_at = DateTime()
    updated_at = DateTime()
    confirmed_at = DateTime()
    shipped_at = DateTime()
    delivered_at = DateTime()
    completed_at = DateTime()
    cancelled_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        user_id,
        items,
        shipping_address,
        billing_address,
        shipping_method="standard",
        notes="",
        shipping_cost=0.0,
        tax_amount=0.0,
        discount_amount=0.0,
        currency="USD",
    ):
        """Create a new pending order.

        Args:
            user_id: The customer placing the order.
            items: Non-empty list of OrderItem snapshots.
            shipping_address: Address (or dict) to ship to.
            billing_address: Address (or dict) to bill.
            shipping_method: Carrier service level, e.g. "standard".
            notes: Free-text notes from the customer.
            shipping_cost, tax_amount, discount_amount: Order-level amounts.
            currency: ISO currency code.
        """
        if not items:
            raise InvalidOrderData("An order needs at least one item")

        now = datetime.now(UTC)
        return cls(
            user_id=user_id,
            status=OrderStatus.PENDING.value,
            payment_status=PaymentStatus.PENDING.value,
            items=list(items),
            shipping_address=_as_address(shipping_address),
            billing_address=_as_address(billing_address),
            shipping_method=shipping_method,
            notes=notes or "",
            shipping_cost=shipping_cost,
            tax_amount=tax_amount,
            discount_amount=discount_amount,
            currency=currency,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Derived amounts
    # -------------------------------------------------------------------
    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def subtotal_price(self) -> float:
        return round(sum(item.total_price for item in self.items), 2)

    @property
    def total_price(self) -> float:
        return round(
            self.subtotal_price + (self.tax_amount or 0.0) + (self.shipping_cost or 0.0) - (self.discount_amount or 0.0),
            2,
        )

    # -------------------------------------------------------------------
    # State machine
    # -------------------------------------------------------------------
    def can_transition_to(self, target) -> bool:
        return OrderStatus(target) in VALID_TRANSITIONS.get(OrderStatus(self.status), frozenset())

    def transition_to(self, target, at: datetime | None = None) -> OrderStatus:
        """Move to ``target`` and return the previous status.

        Raises InvalidStatusTransition, leaving the order untouched, when the
        transition map does not allow it.
        """
        target = OrderStatus(target)
        previous = OrderStatus(self.status)
        if not self.can_transition_to(target):
            raise InvalidStatusTransition(previous, target)

        now = at or datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        timestamp_field = _STATUS_TIMESTAMPS.get(target)
        if timestamp_field:
            setattr(self, timestamp_field, now)

        return previous

    @property
    def is_editable(self) -> bool:
        return OrderStatus(self.status) in _EDITABLE_STATES

    @property
    def is_cancellable(self) -> bool:
        return OrderStatus(self.status) in _CANCELLABLE_STATES

    @property
    def is_refundable(self) -> bool:
        return OrderStatus(self.status) in _REFUNDABLE_STATES

    # -------------------------------------------------------------------
    # Order lifecycle transitions
    # -------------------------------------------------------------------
    def confirm(self) -> OrderStatus:
        return self.transition_to(OrderStatus.CONFIRMED)

    def mark_processing(self) -> OrderStatus:
        """Mark order as being processed (fulfillment started)."""
        return self.transition_to(OrderStatus.PROCESSING)

    def record_shipment(self, tracking_number=None, estimated_delivery=None) -> OrderStatus:
        """Record that the order has been handed to the carrier."""
        previous = self.transition_to(OrderStatus.SHIPPED)
        if tracking_number:
            self.tracking_number = tracking_number
        if estimated_delivery is not None:
            self.estimated_delivery = estimated_delivery
        return previous

    def record_delivery(self) -> OrderStatus:
        """Record that the order has been delivered."""
        previous = self.transition_to(OrderStatus.DELIVERED)
        self.actual_delivery = self.delivered_at
        return previous

    def complete(self) -> OrderStatus:
        return self.transition_to(OrderStatus.COMPLETED)

    def cancel(self, reason: str) -> OrderStatus:
        """Cancel the order. Only allowed before it leaves the warehouse."""
        if not self.is_cancellable:
            raise OrderNotCancellable(self.id, OrderStatus(self.status))

        previous = self.transition_to(OrderStatus.CANCELLED)
        self.cancel_reason = reason
        return previous

    def refund(self, reason: str) -> OrderStatus:
        """Refund a delivered or completed order."""
        if not self.is_refundable:
            raise OrderNotRefundable(self.id, OrderStatus(self.status))

        previous = self.transition_to(OrderStatus.REFUNDED)
        self.cancel_reason = reason
        return previous

    # -------------------------------------------------------------------
    # Narrow edits
    # -------------------------------------------------------------------
    def update_shipping_address(self, address) -> None:
        if not self.is_editable:
            raise OrderNotEditable(self.id, OrderStatus(self.status))
        self.shipping_address = _as_address(address)
        self.updated_at = datetime.now(UTC)

    def update_billing_address(self, address) -> None:
        if not self.is_editable:
            raise OrderNotEditable(self.id, OrderStatus(self.status))
        self.billing_address = _as_address(address)
        self.updated_at = datetime.now(UTC)

    def add_note(self, note: str) -> None:
        self.notes = f"{self.notes}\n{note}" if self.notes else note
        self.updated_at = datetime.now(UTC)

    def update_payment_status(self, payment_status, transaction_id: str | None = None) -> None:
        self.payment_status = PaymentStatus(payment_status).value
        if transaction_id:
            self.transaction_id = transaction_id
        self.updated_at = datetime.now(UTC)

    # -------------------------------------------------------------------
    # Projections
    # -------------------------------------------------------------------
    def stock_reservations(self) -> list[StockReservation]:
        return [item.to_reservation() for item in self.items]

    def to_summary(self) -> OrderSummary:
        return OrderSummary(
            id=str(self.id),
            order_number=self.order_number,
            status=OrderStatus(self.status),
            payment_status=PaymentStatus(self.payment_status),
            item_count=self.item_count,
            total_price=self.total_price,
            created_at=self.created_at,
            estimated_delivery=self.estimated_delivery,
        )


def _as_address(address) -> Address:
    if isinstance(address, dict):
        return Address(**address)
    return address
