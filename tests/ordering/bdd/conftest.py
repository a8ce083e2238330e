"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from notifications.notifier import NotificationType
from ordering.order.exceptions import OrderingError
from pytest_bdd import given, parsers, then


class Outcome:
    """Result of the last When step: the returned order or the domain error raised."""

    def __init__(self):
        self.order = None
        self.error = None

    def attempt(self, action):
        try:
            self.order = action()
        except OrderingError as exc:
            self.error = exc


@pytest.fixture()
def outcome():
    return Outcome()


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('product "{product_id}" has {quantity:d} units in stock'))
def _(inventory, product_id, quantity):
    inventory.set_stock(product_id, quantity)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the action fails with "{error}"'))
def _(outcome, error):
    assert outcome.error is not None, "expected the action to fail"
    assert type(outcome.error).__name__ == error


@then(parsers.cfparse('{quantity:d} units of "{product_id}" are reserved'))
def _(inventory, quantity, product_id):
    assert inventory.reserved_for(product_id) == quantity


@then(parsers.cfparse('{quantity:d} units of "{product_id}" are available'))
def _(inventory, quantity, product_id):
    assert inventory.available_for(product_id) == quantity


@then(parsers.cfparse('a "{notification_type}" notification is sent'))
def _(notifier, notification_type):
    assert notifier.sent_of_type(NotificationType(notification_type))
