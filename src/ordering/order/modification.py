"""Order modification: commands and handler.

Address changes are only allowed while the order is editable (pending or
confirmed). Notes can be appended at any time. Addresses travel as JSON
objects with the Address fields.
"""

import json

from protean import handle
from protean.fields import Identifier, Text

from ordering.domain import ordering
from ordering.order.handler import load_order, save_order
from ordering.order.order import Address, Order


@ordering.command(part_of="Order")
class UpdateShippingAddress:
    order_id = Identifier(required=True)
    address = Text(required=True)  # JSON object


@ordering.command(part_of="Order")
class UpdateBillingAddress:
    order_id = Identifier(required=True)
    address = Text(required=True)  # JSON object


@ordering.command(part_of="Order")
class AddOrderNote:
    order_id = Identifier(required=True)
    note = Text(required=True)


@ordering.command_handler(part_of=Order)
class ModifyOrderHandler:
    @handle(UpdateShippingAddress)
    def update_shipping_address(self, command):
        order = load_order(command.order_id)
        order.update_shipping_address(Address(**json.loads(command.address)))
        save_order(order)

    @handle(UpdateBillingAddress)
    def update_billing_address(self, command):
        order = load_order(command.order_id)
        order.update_billing_address(Address(**json.loads(command.address)))
        save_order(order)

    @handle(AddOrderNote)
    def add_order_note(self, command):
        order = load_order(command.order_id)
        order.add_note(command.note)
        save_order(order)
