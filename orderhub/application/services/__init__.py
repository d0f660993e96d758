"""Application services."""

from .order_service import OrderApplicationService
from .snapshot_builder import OrderSnapshotBuilder

__all__ = ["OrderApplicationService", "OrderSnapshotBuilder"]
