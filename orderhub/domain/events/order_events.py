"""
Order Domain Events.

Recorded by the Order aggregate while a request mutates it.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .base import DomainEvent


@dataclass
class OrderStartedEvent(DomainEvent):
    """A new order was opened in Started status."""

    code: str = ""
    customer_id: Optional[str] = None


@dataclass
class OrderItemAddedEvent(DomainEvent):
    ordered_product_id: str = ""
    product_id: str = ""
    quantity: int = 0
    final_price: Decimal = Decimal("0")


@dataclass
class OrderItemRemovedEvent(DomainEvent):
    ordered_product_id: str = ""


@dataclass
class OrderStatusChangedEvent(DomainEvent):
    """
    Order status moved along the lifecycle.

    `trigger` is the name of the OrderEvent that caused the move.
    """

    previous_status: int = 0
    new_status: int = 0
    trigger: str = ""
