"""
Typed attribute values for the orders document store.

Every leaf is a single-key dict tagging its type, e.g. {"S": "abc"},
{"N": "12.50"}, {"BOOL": True}, {"L": [...]}, {"M": {...}}. Numbers are
carried as strings so decimals survive untouched.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional
from uuid import UUID


AttributeValue = Dict[str, Any]
Document = Dict[str, AttributeValue]


# =============================================================================
# TABLE / INDEX / ATTRIBUTE NAMES
# =============================================================================

ORDERS_TABLE = "fastfood-orders"

CUSTOMER_INDEX = "CustomerId-CreatedAt-Index"
STATUS_INDEX = "Status-CreatedAt-Index"
CODE_INDEX = "Code-Index"

ORDER_ID = "order_id"
CREATED_AT = "created_at"
ORDER_STATUS = "order_status"
CODE = "code"
CUSTOMER_ID = "customer_id"
PAYMENT_STATUS = "PaymentStatus"
TOTAL_PRICE = "TotalPrice"
ORDER_SOURCE = "OrderSource"
ITEMS = "Items"

ITEM_ID = "Id"
ITEM_PRODUCT_ID = "ProductId"
ITEM_QUANTITY = "Quantity"
ITEM_FINAL_PRICE = "FinalPrice"
ITEM_BASE_PRICE = "BasePrice"
ITEM_PRODUCT_NAME = "ProductName"
ITEM_CATEGORY = "Category"
ITEM_OBSERVATION = "Observation"
ITEM_CUSTOM_INGREDIENTS = "CustomIngredients"

INGREDIENT_ID = "Id"
INGREDIENT_NAME = "Name"
INGREDIENT_PRICE = "Price"
INGREDIENT_QUANTITY = "Quantity"
INGREDIENT_BASE_ID = "BaseIngredientId"


# =============================================================================
# CONSTRUCTORS
# =============================================================================

def string_value(value: str) -> AttributeValue:
    return {"S": value}


def number_value(value: Any) -> AttributeValue:
    if isinstance(value, Decimal):
        return {"N": str(value)}
    return {"N": str(int(value))}


def bool_value(value: bool) -> AttributeValue:
    return {"BOOL": bool(value)}


def list_value(values: List[AttributeValue]) -> AttributeValue:
    return {"L": values}


def map_value(values: Mapping[str, AttributeValue]) -> AttributeValue:
    return {"M": dict(values)}


# =============================================================================
# READERS (tolerant of missing keys)
# =============================================================================

def get_string(doc: Mapping[str, AttributeValue], key: str, default: Optional[str] = None) -> Optional[str]:
    value = doc.get(key)
    if not value or "S" not in value:
        return default
    return value["S"]


def get_decimal(doc: Mapping[str, AttributeValue], key: str, default: Decimal = Decimal("0")) -> Decimal:
    value = doc.get(key)
    if not value or "N" not in value:
        return default
    return Decimal(value["N"])


def get_int(doc: Mapping[str, AttributeValue], key: str, default: int = 0) -> int:
    value = doc.get(key)
    if not value or "N" not in value:
        return default
    return int(Decimal(value["N"]))


def get_uuid(doc: Mapping[str, AttributeValue], key: str) -> Optional[UUID]:
    raw = get_string(doc, key)
    return UUID(raw) if raw else None


def get_datetime(doc: Mapping[str, AttributeValue], key: str) -> Optional[datetime]:
    raw = get_string(doc, key)
    return datetime.fromisoformat(raw) if raw else None


def get_list(doc: Mapping[str, AttributeValue], key: str) -> List[AttributeValue]:
    value = doc.get(key)
    if not value or "L" not in value:
        return []
    return value["L"]


def get_map(value: AttributeValue) -> Document:
    return value.get("M", {})


def iter_scalars(value: Any):
    """Yield every scalar leaf under an attribute value or document."""
    if isinstance(value, dict):
        for tag, inner in value.items():
            if tag in ("S", "N"):
                yield inner
            elif tag == "BOOL":
                yield "true" if inner else "false"
            else:
                yield from iter_scalars(inner)
    elif isinstance(value, list):
        for inner in value:
            yield from iter_scalars(inner)
