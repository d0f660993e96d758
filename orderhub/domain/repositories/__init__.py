"""Repository ports."""

from .order_repository import OrderPage, OrderRepository
from .product_repository import ProductRepository

__all__ = ["OrderRepository", "OrderPage", "ProductRepository"]
