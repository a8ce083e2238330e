"""Order store factory.

Provides get_order_store() / set_order_store() to swap implementations.
Defaults to RepositoryOrderStore, which persists through the domain's Order
repository and whatever database provider the domain is configured with.
"""

from ordering.store.port import DuplicateOrderError, OrderStore, OrderStoreError, StaleOrderError
from ordering.store.repository_adapter import RepositoryOrderStore, generate_order_number

__all__ = [
    "DuplicateOrderError",
    "OrderStore",
    "OrderStoreError",
    "RepositoryOrderStore",
    "StaleOrderError",
    "generate_order_number",
    "get_order_store",
    "reset_order_store",
    "set_order_store",
]

_current_store: OrderStore | None = None


def get_order_store() -> OrderStore:
    """Return the current order store. Defaults to RepositoryOrderStore."""
    global _current_store
    if _current_store is None:
        _current_store = RepositoryOrderStore()
    return _current_store


def set_order_store(store: OrderStore) -> None:
    """Override the active order store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_order_store() -> None:
    """Reset to default order store."""
    global _current_store
    _current_store = None
