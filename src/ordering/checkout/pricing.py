"""Shipping and tax strategies used at checkout.

Both are deterministic functions of the shipping method, destination and
items. The saga accepts any callable with the same signature, so a carrier
rate service or tax engine can replace these defaults.
"""

from collections.abc import Callable

from ordering.config import get_settings
from ordering.order.order import Address, OrderItem

ShippingCostStrategy = Callable[[str, Address, list[OrderItem]], float]
TaxStrategy = Callable[[list[OrderItem], Address], float]


def calculate_shipping_cost(shipping_method: str, address: Address, items: list[OrderItem]) -> float:  # noqa: ARG001
    """Flat rate per shipping method; unknown methods pay the default rate."""
    settings = get_settings()
    return settings.shipping_rates.get(shipping_method, settings.default_shipping_rate)


def calculate_tax(items: list[OrderItem], address: Address) -> float:  # noqa: ARG001
    """Single tax rate applied to the item subtotal."""
    subtotal = sum(item.total_price for item in items)
    return round(subtotal * get_settings().tax_rate, 2)
