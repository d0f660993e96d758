"""
Confirm Order Selection Use Case.

Moves a Started order to AwaitingPayment and initiates the payment.

Flow:
1. Load order (not-found raises)
2. Check preconditions: has items, status Started (no mutation on failure)
3. Finalize selection and persist (durability boundary)
4. Build snapshot and call the payment gateway with the caller's token
5. On gateway failure: revert to the captured status, persist, re-raise

The local write (3) and the gateway call (4) are not transactional. A
crash between them leaves the order AwaitingPayment with no payment.
"""
import asyncio
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from orderhub.application.dtos.payment_dto import CreatePaymentRequest
from orderhub.application.interfaces import IPaymentServiceClient, IRequestContext
from orderhub.application.services.snapshot_builder import OrderSnapshotBuilder
from orderhub.domain.entities import Order
from orderhub.domain.enums import OrderStatus
from orderhub.domain.exceptions import BusinessRuleError, GatewayError, OrderNotFoundError
from orderhub.domain.repositories import OrderRepository


logger = logging.getLogger(__name__)


@dataclass
class ConfirmOrderSelectionRequest:
    order_id: UUID


@dataclass
class ConfirmOrderSelectionResponse:
    """
    Outcome of a confirmation.

    payment_id is handed back to the caller only; it is not stored on the
    order.
    """

    order_id: UUID
    status: OrderStatus
    total_price: Decimal
    payment_initiated: bool = False
    payment_id: Optional[UUID] = None


class ConfirmOrderSelectionUseCase:
    """Saga with a single compensating action (revert status)."""

    def __init__(
        self,
        order_repository: OrderRepository,
        payment_client: IPaymentServiceClient,
        request_context: IRequestContext,
        snapshot_builder: Optional[OrderSnapshotBuilder] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order persistence
            payment_client: Payment gateway client
            request_context: Source of the caller's bearer token
            snapshot_builder: Snapshot builder (default currency BRL)
        """
        self.order_repository = order_repository
        self.payment_client = payment_client
        self.request_context = request_context
        self.snapshot_builder = snapshot_builder or OrderSnapshotBuilder()

    async def execute(self, request: ConfirmOrderSelectionRequest) -> ConfirmOrderSelectionResponse:
        """
        Execute the confirmation saga.

        Raises:
            OrderNotFoundError: Order does not exist
            BusinessRuleError: Empty cart or order not in Started
            GatewayError: Payment initiation failed (after compensation)
        """
        order_id = request.order_id

        # Step 1
        order = await self.order_repository.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        # Step 2
        if not order.items:
            raise BusinessRuleError("Cannot confirm an order without items")
        if order.status != OrderStatus.STARTED:
            raise BusinessRuleError(
                f"Only orders in {OrderStatus.STARTED.name} can be confirmed (current: {order.status.name})"
            )

        # Step 3
        previous_status = order.status
        order.finalize_selection()
        await self.order_repository.update(order)
        logger.info(f"[{order_id}] Step 3: Selection finalized, status {order.status.name} persisted")

        # Step 4
        response = ConfirmOrderSelectionResponse(
            order_id=order.id, status=order.status, total_price=order.total_price
        )
        try:
            payment_id = await self._initiate_payment(order)
        except (Exception, asyncio.CancelledError) as e:
            logger.warning(
                f"[{order_id}] Payment initiation failed ({type(e).__name__}); "
                f"reverting {order.status.name} -> {previous_status.name}"
            )
            order.revert_selection(previous_status)
            try:
                await self.order_repository.update(order)
            except Exception as revert_error:
                logger.error(
                    f"[{order_id}] Failed to persist reverted status "
                    f"{previous_status.name}: {revert_error}"
                )
            raise

        if payment_id is not None:
            response.payment_initiated = True
            response.payment_id = payment_id
        return response

    async def _initiate_payment(self, order: Order) -> Optional[UUID]:
        bearer_token = self.request_context.get_bearer_token()
        if not bearer_token or not bearer_token.strip():
            logger.warning(f"[{order.id}] No bearer token on request; payment not initiated")
            return None

        snapshot = self.snapshot_builder.build(order)
        if not snapshot.items:
            raise GatewayError(f"Snapshot of order {order.id} has no items")

        logger.info(f"[{order.id}] Step 4: Initiating payment (total={order.total_price})")
        payment = await self.payment_client.create_payment(
            CreatePaymentRequest(
                order_id=order.id,
                total_amount=order.total_price,
                order_snapshot=snapshot,
            ),
            bearer_token,
        )
        logger.info(f"[{order.id}] Payment initiated: {payment.payment_id}")
        return payment.payment_id
