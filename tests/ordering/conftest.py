"""Shared fixtures for the ordering tests.

Every external collaborator is replaced by its in-memory fake and installed in
the adapter registries, so handlers dispatched through the domain pick them up
too. Orders persist through the domain's memory provider.
"""

import pytest
from inventory.reservation import set_inventory
from inventory.reservation.fake_adapter import FakeInventoryService
from notifications.notifier import set_notifier
from notifications.notifier.fake_adapter import FakeNotifier
from ordering.cart import set_cart_service
from ordering.cart.fake_adapter import FakeCartService
from ordering.checkout.saga import CheckoutSaga, CreateOrderFromCart
from ordering.store import RepositoryOrderStore, set_order_store


@pytest.fixture()
def cart():
    service = FakeCartService()
    set_cart_service(service)
    return service


@pytest.fixture()
def inventory():
    service = FakeInventoryService()
    set_inventory(service)
    return service


@pytest.fixture()
def store():
    order_store = RepositoryOrderStore()
    set_order_store(order_store)
    return order_store


@pytest.fixture()
def notifier():
    fake = FakeNotifier()
    set_notifier(fake)
    return fake


@pytest.fixture()
def saga(cart, inventory, store, notifier):
    return CheckoutSaga()


@pytest.fixture()
def checkout_command(make_address_json):
    return CreateOrderFromCart(
        user_id="user-001",
        shipping_address=make_address_json(),
        billing_address=make_address_json(),
    )


@pytest.fixture()
def placed_order(saga, cart, inventory, checkout_command, make_cart_line):
    """A pending order created through checkout, with stock reserved."""
    inventory.set_stock("prod-001", 10)
    cart.add_line("user-001", make_cart_line())
    return saga.create_order_from_cart(checkout_command)
