import json
from pathlib import Path

import pytest


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Initialize the ordering domain and push its context, so `current_domain`
    resolves everywhere, including in fixtures.
    """
    from ordering.domain import ordering

    ordering.init()
    ordering.domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path) or "/bdd/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from inventory.reservation import reset_inventory
    from notifications.notifier import reset_notifier
    from ordering.cart import reset_cart_service
    from ordering.config import get_settings
    from ordering.store import reset_order_store
    from protean import current_domain

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    reset_cart_service()
    reset_inventory()
    reset_order_store()
    reset_notifier()
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Factories shared by every context's tests
# ---------------------------------------------------------------------------
def _address_data(**overrides):
    data = {
        "first_name": "Jane",
        "last_name": "Doe",
        "address_line_1": "123 Main St",
        "city": "Springfield",
        "state_province": "IL",
        "postal_code": "62701",
        "country": "US",
    }
    data.update(overrides)
    return data


def _address(**overrides):
    from ordering.order.order import Address

    return Address(**_address_data(**overrides))


def _address_json(**overrides):
    return json.dumps(_address_data(**overrides))


def _item(**overrides):
    from ordering.order.order import OrderItem

    data = {
        "product_id": "prod-001",
        "product_name": "Trail Runner",
        "product_sku": "SKU-001",
        "unit_price": 25.0,
        "quantity": 2,
    }
    data.update(overrides)
    return OrderItem(**data)


def _order(items=None, **overrides):
    from ordering.order.order import Order

    data = {
        "user_id": "user-001",
        "items": items if items is not None else [_item()],
        "shipping_address": _address(),
        "billing_address": _address(),
    }
    data.update(overrides)
    return Order.create(**data)


def _cart_line(**overrides):
    from ordering.cart import CartLine

    data = {
        "product_id": "prod-001",
        "sku": "SKU-001",
        "product_name": "Trail Runner",
        "unit_price": 149.99,
        "quantity": 2,
    }
    data.update(overrides)
    return CartLine(**data)


@pytest.fixture()
def make_address():
    return _address


@pytest.fixture()
def make_address_json():
    return _address_json


@pytest.fixture()
def make_item():
    return _item


@pytest.fixture()
def make_order():
    return _order


@pytest.fixture()
def make_cart_line():
    return _cart_line
