"""Repository interface for catalog lookups."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from ..entities.product import Product


class ProductRepository(ABC):
    """Read-only catalog port used when adding products to an order."""

    @abstractmethod
    async def get_by_id(self, product_id: UUID) -> Optional[Product]:
        """Retrieve product with its base ingredients.

        Args:
            product_id: Product identifier

        Returns:
            Product if found, None otherwise
        """
