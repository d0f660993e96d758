"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from ..entities.order import Order
from ..enums import OrderStatus


@dataclass
class OrderPage:
    """One page of orders produced by cursor-emulated pagination."""

    items: List[Order] = field(default_factory=list)
    page: int = 1
    page_size: int = 10
    has_next_page: bool = False
    last_token: Optional[str] = None


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """

    @abstractmethod
    async def get_by_customer_id(self, customer_id: UUID) -> List[Order]:
        """List every order of a customer (customer index)."""

    @abstractmethod
    async def get_by_status(self, status: OrderStatus) -> List[Order]:
        """List every order in a status (status index)."""

    @abstractmethod
    async def get_by_status_without_preparation(self, status: OrderStatus) -> List[Order]:
        """Same as get_by_status, minus orders already in preparation."""

    @abstractmethod
    async def get_paged(
        self, page: int, page_size: int, status: Optional[OrderStatus] = None
    ) -> OrderPage:
        """Return one 1-based page of orders, optionally filtered by status.

        Args:
            page: 1-based page number
            page_size: Number of orders per page
            status: Optional equality filter served by the status index

        Returns:
            OrderPage with the window and an approximate has_next_page flag
        """

    @abstractmethod
    async def add(self, order: Order) -> None:
        """Persist a new order. Rejects oversized documents."""

    @abstractmethod
    async def update(self, order: Order) -> None:
        """Overwrite a stored order. Rejects oversized documents."""

    @abstractmethod
    async def delete(self, order_id: UUID) -> None:
        """Delete order if present."""

    @abstractmethod
    async def exists(self, order_id: UUID) -> bool:
        """Check if order exists."""

    @abstractmethod
    async def exists_by_code(self, code: str) -> bool:
        """Check if an order already carries `code` (code index)."""

    @abstractmethod
    async def generate_order_code(self) -> str:
        """Produce an order code not used by any stored order."""
