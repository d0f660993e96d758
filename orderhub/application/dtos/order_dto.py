"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from orderhub.domain.entities import Order, OrderedProduct, OrderedProductIngredient
from orderhub.domain.enums import OrderStatus, PaymentStatus, ProductCategory
from orderhub.domain.repositories import OrderPage


class CustomIngredientRequest(BaseModel):
    """Requested quantity of one product base ingredient."""

    product_base_ingredient_id: UUID = Field(..., description="Catalog base ingredient id")
    quantity: int = Field(..., description="Requested quantity (clamped to 0..10)")

    model_config = {"frozen": True}


class AddProductRequest(BaseModel):
    order_id: UUID = Field(..., description="Target order")
    product_id: UUID = Field(..., description="Catalog product")
    quantity: int = Field(..., description="Quantity (> 0)")
    observation: Optional[str] = Field(None, description="Free-text note")
    custom_ingredients: List[CustomIngredientRequest] = Field(
        default_factory=list, description="Ingredient overrides"
    )

    model_config = {"frozen": True}


class UpdateProductRequest(BaseModel):
    order_id: UUID = Field(..., description="Target order")
    ordered_product_id: UUID = Field(..., description="Line item to change")
    quantity: Optional[int] = Field(None, description="New quantity (> 0)")
    observation: Optional[str] = Field(None, description="New note")
    custom_ingredients: List[CustomIngredientRequest] = Field(
        default_factory=list, description="Ingredient quantity changes"
    )

    model_config = {"frozen": True}


class OrderedProductIngredientDTO(BaseModel):
    id: UUID
    name: str
    price: Decimal
    quantity: int
    base_ingredient_id: Optional[UUID] = None

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, ingredient: OrderedProductIngredient) -> "OrderedProductIngredientDTO":
        return cls(
            id=ingredient.id,
            name=ingredient.name,
            price=ingredient.price,
            quantity=ingredient.quantity,
            base_ingredient_id=ingredient.base_ingredient_id,
        )


class OrderedProductDTO(BaseModel):
    id: UUID
    product_id: UUID
    product_name: str
    category: ProductCategory
    quantity: int
    final_price: Decimal
    observation: Optional[str] = None
    custom_ingredients: List[OrderedProductIngredientDTO] = Field(default_factory=list)

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, item: OrderedProduct) -> "OrderedProductDTO":
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            category=item.category,
            quantity=item.quantity,
            final_price=item.final_price,
            observation=item.observation,
            custom_ingredients=[
                OrderedProductIngredientDTO.from_entity(i) for i in item.custom_ingredients
            ],
        )


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: UUID = Field(..., description="Order id")
    code: str = Field(..., description="Human-readable order code")
    customer_id: Optional[UUID] = Field(None, description="Customer, if identified")
    created_at: datetime = Field(..., description="Creation time (UTC)")
    status: OrderStatus = Field(..., description="Order status")
    payment_status: PaymentStatus = Field(..., description="Payment status")
    total_price: Decimal = Field(..., ge=0, description="Sum of item final prices")
    source: Optional[str] = Field(None, description="Origin tag")
    items: List[OrderedProductDTO] = Field(default_factory=list, description="Line items")

    model_config = {"frozen": True}

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            code=order.code,
            customer_id=order.customer_id,
            created_at=order.created_at,
            status=order.status,
            payment_status=order.payment_status,
            total_price=order.total_price,
            source=order.source,
            items=[OrderedProductDTO.from_entity(item) for item in order.items],
        )


class PagedOrdersDTO(BaseModel):
    orders: List[OrderDTO] = Field(default_factory=list, description="Orders in this page")
    page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    has_next_page: bool = Field(False, description="Approximate, see repository")

    model_config = {"frozen": True}

    @classmethod
    def from_page(cls, page: OrderPage) -> "PagedOrdersDTO":
        return cls(
            orders=[OrderDTO.from_entity(order) for order in page.items],
            page=page.page,
            page_size=page.page_size,
            has_next_page=page.has_next_page,
        )
