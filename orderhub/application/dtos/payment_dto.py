"""
Payment gateway DTOs.

Field names go over the wire in camelCase. The order snapshot travels as a
JSON *string* inside the outer body; the gateway decodes it separately.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_serializer
from pydantic.alias_generators import to_camel


# Decimals are sent as JSON numbers, not strings
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class GatewayModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class OrderSnapshotOrder(GatewayModel):
    order_id: UUID
    code: str
    created_at: datetime


class OrderSnapshotPricing(GatewayModel):
    total_price: JsonDecimal
    currency: str = "BRL"


class OrderSnapshotIngredient(GatewayModel):
    name: str
    price: JsonDecimal
    quantity: int


class OrderSnapshotItem(GatewayModel):
    product_id: UUID
    product_name: str
    quantity: int
    final_price: JsonDecimal
    observation: Optional[str] = None
    custom_ingredients: List[OrderSnapshotIngredient] = Field(default_factory=list)


class OrderSnapshot(GatewayModel):
    """Privacy-scrubbed view of an order: no customer attributes."""

    order: OrderSnapshotOrder
    pricing: OrderSnapshotPricing
    items: List[OrderSnapshotItem] = Field(default_factory=list)
    version: int = 1


class CreatePaymentRequest(GatewayModel):
    order_id: UUID = Field(..., description="Order being paid")
    total_amount: JsonDecimal = Field(..., description="Amount to charge")
    order_snapshot: OrderSnapshot = Field(..., description="Snapshot sent string-encoded")

    @field_serializer("order_snapshot", when_used="json")
    def _encode_snapshot(self, snapshot: OrderSnapshot) -> str:
        return snapshot.model_dump_json(by_alias=True)

    def to_gateway_payload(self) -> Dict[str, Any]:
        """Outer request body: {orderId, totalAmount, orderSnapshot: "<json>"}."""
        return self.model_dump(mode="json", by_alias=True)


class CreatePaymentResponse(GatewayModel):
    payment_id: UUID
    status: str = ""
    created_at: Optional[datetime] = None
