"""Payment status tracked on the order."""

from enum import IntEnum


class PaymentStatus(IntEnum):
    NOT_STARTED = 1
    AWAITING_PAYMENT = 2
    PAID = 3
    FAILED = 4
    REFUNDED = 5
