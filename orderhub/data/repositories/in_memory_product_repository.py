"""
In-memory catalog lookup.

Product CRUD is owned elsewhere; this adapter only serves lookups for
add-to-order and is seeded by whoever wires the application.
"""
import copy
import logging
from typing import Dict, Iterable, Optional
from uuid import UUID

from orderhub.domain.entities import Product
from orderhub.domain.repositories import ProductRepository


logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):
    def __init__(self, products: Iterable[Product] = ()):
        self._storage: Dict[UUID, Product] = {}
        for product in products:
            self.add(product)

    def add(self, product: Product) -> None:
        self._storage[product.id] = copy.deepcopy(product)
        logger.info(f"Product registered: {product.id} ({product.name})")

    async def get_by_id(self, product_id: UUID) -> Optional[Product]:
        product = self._storage.get(product_id)
        return copy.deepcopy(product) if product else None
