"""Checkout saga: converts a user's cart into a persisted order.

The cart store, inventory, order store and notifier are independent systems
with no shared transaction, so checkout runs as a saga with exactly one
compensating action.

Flow:
    1. Read the cart                      → CartUnavailable
    2. Reject empty or malformed carts    → EmptyCart / InvalidOrderData
       (every line must fit an OrderItem snapshot)
    3. Validate availability of each line → ProductUnavailable / InventoryCheckFailed
    4. Reserve stock for all lines at once → StockReservationFailed
    5. Build the pending order (shipping, tax)
    6. Persist the order                  → OrderCreationFailed, after releasing
                                             the reservation (compensation)
    7. Clear the cart                     (best effort, logged)
    8. Send the order confirmation        (best effort, logged)

The saga is not idempotent: running it twice for the same non-empty cart
creates two orders and reserves stock twice.
"""

import json
from datetime import UTC, datetime

import structlog
from inventory.reservation import InventoryService, StockReservation, get_inventory
from notifications.notifier import OrderNotifier, get_notifier
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text

from ordering.cart import CartData, CartLine, CartService, get_cart_service
from ordering.checkout.pricing import (
    ShippingCostStrategy,
    TaxStrategy,
    calculate_shipping_cost,
    calculate_tax,
)
from ordering.config import get_settings
from ordering.domain import ordering
from ordering.order.exceptions import (
    CartUnavailable,
    EmptyCart,
    InventoryCheckFailed,
    InvalidOrderData,
    OrderCreationFailed,
    ProductUnavailable,
    StockReservationFailed,
)
from ordering.order.order import Address, Order, OrderItem
from ordering.store import OrderStore, get_order_store

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class CreateOrderFromCart:
    """Place an order for everything in the user's cart."""

    user_id = Identifier(required=True)
    shipping_address = Text(required=True)  # JSON object
    billing_address = Text(required=True)  # JSON object
    shipping_method = String(max_length=100, default="standard")
    notes = Text()


class CheckoutSaga:
    """Coordinates cart, inventory, order store and notifications at checkout."""

    def __init__(
        self,
        cart: CartService | None = None,
        inventory: InventoryService | None = None,
        store: OrderStore | None = None,
        notifier: OrderNotifier | None = None,
        shipping_cost: ShippingCostStrategy | None = None,
        tax: TaxStrategy | None = None,
    ):
        self.cart = cart or get_cart_service()
        self.inventory = inventory or get_inventory()
        self.store = store or get_order_store()
        self.notifier = notifier or get_notifier()
        self.shipping_cost = shipping_cost or calculate_shipping_cost
        self.tax = tax or calculate_tax

    def create_order_from_cart(self, command: CreateOrderFromCart) -> Order:
        user_id = str(command.user_id)
        log = logger.bind(user_id=user_id)

        shipping_address = _parse_address("shipping_address", command.shipping_address)
        billing_address = _parse_address("billing_address", command.billing_address)

        cart = self._fetch_cart(user_id)
        items = self._validate_cart(cart)
        self._validate_availability(cart.items)

        reservations = [item.to_reservation() for item in items]
        try:
            self.inventory.reserve_stock(reservations)
        except Exception as exc:
            log.warning("Stock reservation failed", error=str(exc))
            raise StockReservationFailed() from exc

        try:
            order = Order.create(
                user_id=user_id,
                items=items,
                shipping_address=shipping_address,
                billing_address=billing_address,
                shipping_method=command.shipping_method or "standard",
                notes=command.notes or "",
                shipping_cost=self.shipping_cost(command.shipping_method or "standard", shipping_address, items),
                tax_amount=self.tax(items, shipping_address),
                currency=get_settings().currency,
            )
            self.store.create_order(order)
        except Exception as exc:
            log.error("Order creation failed, releasing reserved stock", error=str(exc))
            self._release(reservations, log)
            raise OrderCreationFailed() from exc

        log = log.bind(order_id=str(order.id), order_number=order.order_number)
        log.info("Order created from cart", item_count=order.item_count, total_price=order.total_price)

        try:
            self.cart.clear_cart_by_user_id(user_id)
        except Exception as exc:
            log.warning("Failed to clear cart after checkout", error=str(exc))

        try:
            self.notifier.send_order_confirmation(order)
        except Exception as exc:
            log.warning("Failed to send order confirmation", error=str(exc))

        return order

    # -------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------
    def _fetch_cart(self, user_id: str) -> CartData:
        try:
            return self.cart.get_cart_by_user_id(user_id)
        except Exception as exc:
            logger.warning("Failed to get user cart", user_id=user_id, error=str(exc))
            raise CartUnavailable(user_id) from exc

    def _validate_cart(self, cart: CartData) -> list[OrderItem]:
        """Check every line and return the OrderItem snapshots for the order."""
        if not cart.items:
            raise EmptyCart(cart.user_id)

        for line in cart.items:
            if line.quantity <= 0:
                raise InvalidOrderData(f"Quantity for product {line.sku} must be positive")
            if line.unit_price < 0:
                raise InvalidOrderData(f"Price for product {line.sku} cannot be negative")

        return [_snapshot(line) for line in cart.items]

    def _validate_availability(self, lines: tuple[CartLine, ...]) -> None:
        for line in lines:
            try:
                available = self.inventory.validate_availability(line.product_id, line.variant_id, line.quantity)
            except Exception as exc:
                logger.warning("Availability check failed", sku=line.sku, error=str(exc))
                raise InventoryCheckFailed(line.sku) from exc

            if not available:
                raise ProductUnavailable(line.sku)

    def _release(self, reservations: list[StockReservation], log) -> None:
        try:
            self.inventory.release_stock(reservations)
        except Exception as exc:
            log.error("Failed to release reserved stock", error=str(exc))


def _snapshot(line: CartLine) -> OrderItem:
    try:
        return OrderItem(
            product_id=line.product_id,
            variant_id=line.variant_id,
            product_name=line.product_name,
            product_sku=line.sku,
            variant_name=line.variant_name,
            size=line.size,
            color=line.color,
            image_url=line.image_url,
            unit_price=line.unit_price,
            quantity=line.quantity,
            created_at=datetime.now(UTC),
        )
    except ValidationError as exc:
        raise InvalidOrderData(f"Invalid cart line for product {line.sku}: {exc.messages}") from exc


def _parse_address(field: str, raw: str) -> Address:
    try:
        return Address(**json.loads(raw))
    except (TypeError, ValueError, ValidationError) as exc:
        raise InvalidOrderData(f"Invalid {field}") from exc


@ordering.command_handler(part_of=Order)
class CheckoutHandler:
    @handle(CreateOrderFromCart)
    def create_order_from_cart(self, command):
        order = CheckoutSaga().create_order_from_cart(command)
        return str(order.id)
