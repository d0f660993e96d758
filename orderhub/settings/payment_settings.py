# orderhub/settings/payment_settings.py
from pydantic import Field
from pydantic_settings import SettingsConfigDict

from .base import OrderHubBaseSettings


class PaymentServiceSettings(OrderHubBaseSettings):
    """
    Payment gateway client settings.

    Env vars: PAYMENT_SERVICE_BASE_URL, PAYMENT_SERVICE_RETRY_ENABLED, ...
    """

    model_config = SettingsConfigDict(env_prefix="PAYMENT_SERVICE_")

    base_url: str = "http://localhost:5000"
    create_path: str = "/payment/create"
    timeout_seconds: float = Field(30, gt=0)
    retry_enabled: bool = False
    retry_count: int = Field(1, ge=1)  # total attempts, first one included
    retry_delay_seconds: float = Field(1.0, ge=0)
    currency: str = "BRL"

    @property
    def max_attempts(self) -> int:
        return self.retry_count if self.retry_enabled else 1
