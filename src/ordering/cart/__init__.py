"""Cart service factory.

Provides get_cart_service() / set_cart_service() to swap implementations.
Defaults to FakeCartService until a client for the cart store is configured.
"""

from ordering.cart.fake_adapter import FakeCartService
from ordering.cart.port import CartData, CartLine, CartService, CartServiceError

__all__ = [
    "CartData",
    "CartLine",
    "CartService",
    "CartServiceError",
    "get_cart_service",
    "reset_cart_service",
    "set_cart_service",
]

_current_cart_service: CartService | None = None


def get_cart_service() -> CartService:
    """Return the current cart service. Defaults to FakeCartService."""
    global _current_cart_service
    if _current_cart_service is None:
        _current_cart_service = FakeCartService()
    return _current_cart_service


def set_cart_service(cart_service: CartService) -> None:
    """Override the active cart service (useful for tests)."""
    global _current_cart_service
    _current_cart_service = cart_service


def reset_cart_service() -> None:
    """Reset to default cart service."""
    global _current_cart_service
    _current_cart_service = None
