from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from orderhub.settings.order_code_settings import OrderCodeSettings
from orderhub.settings.order_store_settings import OrderStoreSettings
from orderhub.settings.payment_settings import PaymentServiceSettings


class AppSettings(BaseModel):
    """
    Central application settings aggregator.

    Each section is its own BaseSettings with its own env prefix.
    """

    model_config = ConfigDict(frozen=True)

    payment: PaymentServiceSettings
    store: OrderStoreSettings
    order_code: OrderCodeSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings(
        payment=PaymentServiceSettings(),
        store=OrderStoreSettings(),
        order_code=OrderCodeSettings(),
    )
