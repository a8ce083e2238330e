"""Application tests for address changes and order notes."""

import pytest
from ordering.order.confirmation import ConfirmOrder
from ordering.order.exceptions import OrderNotEditable
from ordering.order.fulfillment import ProcessOrder
from ordering.order.modification import AddOrderNote, UpdateBillingAddress, UpdateShippingAddress
from protean import current_domain
from protean.exceptions import ValidationError


def _process(command):
    current_domain.process(command, asynchronous=False)


class TestAddressChanges:
    def test_update_shipping_address_while_pending(self, placed_order, store, make_address_json):
        _process(UpdateShippingAddress(order_id=placed_order.id, address=make_address_json(city="Shelbyville")))

        stored = store.get_order_by_id(placed_order.id)
        assert stored.shipping_address.city == "Shelbyville"
        assert stored.billing_address.city == "Springfield"

    def test_update_billing_address_while_confirmed(self, placed_order, store, make_address_json):
        _process(ConfirmOrder(order_id=placed_order.id))

        _process(UpdateBillingAddress(order_id=placed_order.id, address=make_address_json(postal_code="90210")))

        assert store.get_order_by_id(placed_order.id).billing_address.postal_code == "90210"

    def test_address_change_rejected_once_processing(self, placed_order, store, make_address_json):
        _process(ConfirmOrder(order_id=placed_order.id))
        _process(ProcessOrder(order_id=placed_order.id))

        with pytest.raises(OrderNotEditable):
            _process(UpdateShippingAddress(order_id=placed_order.id, address=make_address_json(city="Shelbyville")))

        assert store.get_order_by_id(placed_order.id).shipping_address.city == "Springfield"

    def test_incomplete_address_rejected(self, placed_order, store, make_address_json):
        with pytest.raises(ValidationError):
            _process(UpdateShippingAddress(order_id=placed_order.id, address=make_address_json(city="")))

        assert store.get_order_by_id(placed_order.id).shipping_address.city == "Springfield"

    def test_modification_sends_no_notification(self, placed_order, notifier, make_address_json):
        notifier.sent.clear()
        _process(UpdateShippingAddress(order_id=placed_order.id, address=make_address_json(city="Shelbyville")))
        assert notifier.sent == []


class TestOrderNotes:
    def test_notes_accumulate(self, placed_order, store):
        _process(AddOrderNote(order_id=placed_order.id, note="Ring the bell"))
        _process(AddOrderNote(order_id=placed_order.id, note="Fragile"))

        assert store.get_order_by_id(placed_order.id).notes == "Ring the bell\nFragile"

    def test_empty_note_rejected(self, placed_order):
        with pytest.raises(ValidationError):
            AddOrderNote(order_id=placed_order.id, note="")
