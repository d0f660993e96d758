"""Application use cases."""

from .confirm_order_selection import (
    ConfirmOrderSelectionRequest,
    ConfirmOrderSelectionResponse,
    ConfirmOrderSelectionUseCase,
)

__all__ = [
    "ConfirmOrderSelectionUseCase",
    "ConfirmOrderSelectionRequest",
    "ConfirmOrderSelectionResponse",
]
