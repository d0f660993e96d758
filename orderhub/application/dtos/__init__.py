"""Application DTOs."""

from .order_dto import (
    AddProductRequest,
    CustomIngredientRequest,
    OrderDTO,
    OrderedProductDTO,
    OrderedProductIngredientDTO,
    PagedOrdersDTO,
    UpdateProductRequest,
)
from .payment_dto import (
    CreatePaymentRequest,
    CreatePaymentResponse,
    OrderSnapshot,
    OrderSnapshotIngredient,
    OrderSnapshotItem,
    OrderSnapshotOrder,
    OrderSnapshotPricing,
)

__all__ = [
    "AddProductRequest",
    "CustomIngredientRequest",
    "UpdateProductRequest",
    "OrderDTO",
    "OrderedProductDTO",
    "OrderedProductIngredientDTO",
    "PagedOrdersDTO",
    "CreatePaymentRequest",
    "CreatePaymentResponse",
    "OrderSnapshot",
    "OrderSnapshotOrder",
    "OrderSnapshotPricing",
    "OrderSnapshotItem",
    "OrderSnapshotIngredient",
]
