"""
Order status state machine.

Statuses only move along the edges declared in TRANSITIONS. The single
backwards edge is AwaitingPayment -> Started, used to compensate a failed
payment initiation.
"""
from enum import Enum
from typing import Dict, Optional, Tuple

from .enums import OrderStatus
from .exceptions import IllegalTransitionError


class OrderEvent(str, Enum):
    """Things that can happen to an order."""

    CONFIRM_SELECTION = "confirm_selection"
    REVERT_SELECTION = "revert_selection"
    CONFIRM_PAYMENT = "confirm_payment"
    SEND_TO_KITCHEN = "send_to_kitchen"
    MARK_READY = "mark_ready"
    COMPLETE = "complete"
    CANCEL = "cancel"


TRANSITIONS: Dict[Tuple[OrderStatus, OrderEvent], OrderStatus] = {
    (OrderStatus.STARTED, OrderEvent.CONFIRM_SELECTION): OrderStatus.AWAITING_PAYMENT,
    (OrderStatus.AWAITING_PAYMENT, OrderEvent.REVERT_SELECTION): OrderStatus.STARTED,
    (OrderStatus.AWAITING_PAYMENT, OrderEvent.CONFIRM_PAYMENT): OrderStatus.PAYMENT_CONFIRMED,
    (OrderStatus.PAYMENT_CONFIRMED, OrderEvent.SEND_TO_KITCHEN): OrderStatus.IN_PREPARATION,
    (OrderStatus.IN_PREPARATION, OrderEvent.MARK_READY): OrderStatus.READY_FOR_PICKUP,
    (OrderStatus.READY_FOR_PICKUP, OrderEvent.COMPLETE): OrderStatus.COMPLETED,
    (OrderStatus.STARTED, OrderEvent.CANCEL): OrderStatus.CANCELLED,
    (OrderStatus.AWAITING_PAYMENT, OrderEvent.CANCEL): OrderStatus.CANCELLED,
    (OrderStatus.PAYMENT_CONFIRMED, OrderEvent.CANCEL): OrderStatus.CANCELLED,
}


def transition(current: OrderStatus, event: OrderEvent) -> OrderStatus:
    """
    Resolve the status reached by applying `event` in `current`.

    Args:
        current: Status the order is in
        event: Event being applied

    Returns:
        The new status

    Raises:
        IllegalTransitionError: No edge exists for (current, event)
    """
    try:
        return TRANSITIONS[(current, event)]
    except KeyError:
        raise IllegalTransitionError(current.name, event.value) from None


def event_for(current: OrderStatus, target: OrderStatus) -> Optional[OrderEvent]:
    """Return the event leading from `current` to `target`, if any."""
    for (source, event), destination in TRANSITIONS.items():
        if source == current and destination == target:
            return event
    return None


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return event_for(current, target) is not None
