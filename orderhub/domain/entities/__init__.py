"""Domain entities."""

from .order import (
    MAX_INGREDIENT_QUANTITY,
    MIN_INGREDIENT_QUANTITY,
    Order,
    OrderedProduct,
    OrderedProductIngredient,
)
from .product import Product, ProductBaseIngredient

__all__ = [
    "Order",
    "OrderedProduct",
    "OrderedProductIngredient",
    "Product",
    "ProductBaseIngredient",
    "MIN_INGREDIENT_QUANTITY",
    "MAX_INGREDIENT_QUANTITY",
]
