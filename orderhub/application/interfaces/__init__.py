"""
Application ports.

Abstract interfaces the application layer depends on; infrastructure
provides the implementations.
"""
from abc import ABC, abstractmethod
from typing import Optional

from orderhub.application.dtos.payment_dto import CreatePaymentRequest, CreatePaymentResponse


class IPaymentServiceClient(ABC):
    """Interface for the external payment gateway."""

    @abstractmethod
    async def create_payment(
        self, request: CreatePaymentRequest, bearer_token: str
    ) -> CreatePaymentResponse:
        """Initiate a payment for an order.

        Args:
            request: Payment request carrying the order snapshot
            bearer_token: Caller's token, forwarded as Authorization header

        Returns:
            Gateway response with the payment id

        Raises:
            GatewayError: After the configured retry policy is exhausted,
                or immediately on a terminal status
        """


class IRequestContext(ABC):
    """Interface for per-request caller information."""

    @abstractmethod
    def get_bearer_token(self) -> Optional[str]:
        """Bearer token without the "Bearer " prefix, or None."""


__all__ = ["IPaymentServiceClient", "IRequestContext"]
