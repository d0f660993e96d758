"""Catalog product referenced (and snapshotted) by ordered products."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ..enums import ProductCategory


@dataclass
class ProductBaseIngredient:
    id: UUID
    name: str
    price: Decimal
    product_id: Optional[UUID] = None


@dataclass
class Product:
    """Catalog product. Catalog CRUD lives outside this package."""

    id: UUID
    name: str
    category: ProductCategory
    price: Decimal
    description: Optional[str] = None
    is_active: bool = True
    base_ingredients: List[ProductBaseIngredient] = field(default_factory=list)

    def is_valid(self) -> bool:
        """Name must be non-blank and price positive."""
        return bool(self.name and self.name.strip()) and self.price > 0

    def find_base_ingredient(self, ingredient_id: UUID) -> Optional[ProductBaseIngredient]:
        for ingredient in self.base_ingredients:
            if ingredient.id == ingredient_id:
                return ingredient
        return None
