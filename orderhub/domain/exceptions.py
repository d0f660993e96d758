"""
Domain exceptions.

Every error raised by OrderHub derives from OrderHubError so callers can
map the categories (not-found, validation, business-rule, capacity,
gateway) onto their own transport.
"""
from typing import Optional


class OrderHubError(Exception):
    """Base class for all OrderHub errors."""


# =============================================================================
# NOT FOUND
# =============================================================================

class NotFoundError(OrderHubError):
    """A referenced entity does not exist."""


class OrderNotFoundError(NotFoundError):
    def __init__(self, order_id: object):
        super().__init__(f"Order {order_id} not found")
        self.order_id = order_id


class ProductNotFoundError(NotFoundError):
    def __init__(self, product_id: object):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class OrderedProductNotFoundError(NotFoundError):
    def __init__(self, ordered_product_id: object):
        super().__init__(f"Ordered product {ordered_product_id} not found in order")
        self.ordered_product_id = ordered_product_id


# =============================================================================
# VALIDATION / BUSINESS RULES
# =============================================================================

class OrderValidationError(OrderHubError, ValueError):
    """Input rejected before touching any state."""


class BusinessRuleError(OrderHubError):
    """Request is well-formed but not allowed in the current state."""


class IllegalTransitionError(BusinessRuleError):
    def __init__(self, current: object, target: object):
        super().__init__(f"Illegal status transition: {current} -> {target}")
        self.current = current
        self.target = target


# =============================================================================
# CAPACITY
# =============================================================================

class CapacityError(OrderHubError):
    """A hard storage or generation limit was hit."""


class ItemSizeExceededError(CapacityError):
    def __init__(self, estimated_kb: float, max_kb: int):
        super().__init__(
            f"Order document too large: ~{estimated_kb:.2f} KB exceeds {max_kb} KB limit"
        )
        self.estimated_kb = estimated_kb
        self.max_kb = max_kb


class OrderCodeExhaustedError(CapacityError):
    def __init__(self, attempts: int):
        super().__init__(f"Could not generate a unique order code after {attempts} attempts")
        self.attempts = attempts


# =============================================================================
# GATEWAY
# =============================================================================

class GatewayError(OrderHubError):
    """Payment gateway call failed (after retries, if any)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GatewayAuthenticationError(GatewayError):
    """Gateway rejected the bearer token (HTTP 401)."""

    def __init__(self, message: str = "Payment gateway rejected the token: invalid or expired"):
        super().__init__(message, status_code=401)
