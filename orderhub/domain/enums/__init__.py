"""Domain enums."""

from .order_status import OrderStatus
from .payment_status import PaymentStatus
from .product_category import ProductCategory

__all__ = ["OrderStatus", "PaymentStatus", "ProductCategory"]
