"""Ordering settings, read from ``ORDERING_*`` environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class OrderingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ORDERING_")

    # --- Pricing ---
    currency: str = "USD"
    tax_rate: float = 0.085
    shipping_rates: dict[str, float] = {
        "standard": 5.99,
        "express": 12.99,
        "overnight": 24.99,
    }
    default_shipping_rate: float = 5.99

    # --- Order numbers ---
    order_number_prefix: str = "ORD"

    # --- Pagination ---
    default_page_size: int = 10
    max_page_size: int = 100


@lru_cache
def get_settings() -> OrderingSettings:
    return OrderingSettings()
