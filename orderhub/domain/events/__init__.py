"""Domain events."""

from .base import DomainEvent
from .order_events import (
    OrderItemAddedEvent,
    OrderItemRemovedEvent,
    OrderStartedEvent,
    OrderStatusChangedEvent,
)

__all__ = [
    "DomainEvent",
    "OrderStartedEvent",
    "OrderItemAddedEvent",
    "OrderItemRemovedEvent",
    "OrderStatusChangedEvent",
]
