# orderhub/settings/order_store_settings.py
from pydantic import Field
from pydantic_settings import SettingsConfigDict

from .base import OrderHubBaseSettings


class OrderStoreSettings(OrderHubBaseSettings):
    model_config = SettingsConfigDict(env_prefix="ORDER_STORE_")

    database_url: str = "sqlite+aiosqlite:///./orderhub.db"
    orders_table: str = "fastfood-orders"
    max_item_size_kb: int = Field(400, gt=0)
    echo_sql: bool = False
