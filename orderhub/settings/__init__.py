# Settings package
from orderhub.settings.app_settings import AppSettings, get_app_settings
from orderhub.settings.order_code_settings import OrderCodeSettings
from orderhub.settings.order_store_settings import OrderStoreSettings
from orderhub.settings.payment_settings import PaymentServiceSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "OrderCodeSettings",
    "OrderStoreSettings",
    "PaymentServiceSettings",
]
