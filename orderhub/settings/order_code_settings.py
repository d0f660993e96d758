# orderhub/settings/order_code_settings.py
from pydantic import Field
from pydantic_settings import SettingsConfigDict

from .base import OrderHubBaseSettings


class OrderCodeSettings(OrderHubBaseSettings):
    model_config = SettingsConfigDict(env_prefix="ORDER_CODE_")

    prefix: str = "ORD"
    max_attempts: int = Field(10, ge=1)
