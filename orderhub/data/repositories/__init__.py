"""Repository implementations."""

from .in_memory_product_repository import InMemoryProductRepository
from .order_repository_impl import DocumentOrderRepository, ORDER_INDEXES

__all__ = ["DocumentOrderRepository", "InMemoryProductRepository", "ORDER_INDEXES"]
