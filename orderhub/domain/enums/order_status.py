"""Order lifecycle status."""

from enum import IntEnum


class OrderStatus(IntEnum):
    """Status of an order. Values are persisted as numbers."""

    STARTED = 1
    AWAITING_PAYMENT = 2
    PAYMENT_CONFIRMED = 3
    IN_PREPARATION = 4
    READY_FOR_PICKUP = 5
    COMPLETED = 6
    CANCELLED = 7
