"""Payment gateway adapter."""

from .payment_service_client import PaymentServiceClient

__all__ = ["PaymentServiceClient"]
