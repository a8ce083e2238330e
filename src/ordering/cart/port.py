"""Cart port (abstract interface).

The cart store is owned by another service; checkout only needs to read a
user's cart and to clear it once the order exists.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class CartServiceError(Exception):
    """Raised by adapters when the cart store cannot be reached or refuses a request."""


@dataclass(frozen=True)
class CartLine:
    """One cart line with the product snapshot shown to the customer."""

    product_id: str
    sku: str
    product_name: str
    unit_price: float
    quantity: int
    variant_id: str | None = None
    variant_name: str | None = None
    size: str | None = None
    color: str | None = None
    image_url: str | None = None


@dataclass(frozen=True)
class CartData:
    user_id: str
    items: tuple[CartLine, ...] = field(default_factory=tuple)

    @property
    def total_price(self) -> float:
        return round(sum(line.unit_price * line.quantity for line in self.items), 2)


class CartService(ABC):
    """Abstract cart interface."""

    @abstractmethod
    def get_cart_by_user_id(self, user_id: str) -> CartData:
        """Return the user's cart. A user without a cart gets an empty one."""
        ...

    @abstractmethod
    def clear_cart_by_user_id(self, user_id: str) -> None:
        """Remove every line from the user's cart."""
        ...
