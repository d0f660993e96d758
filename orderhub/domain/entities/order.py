"""
Order aggregate root.

The order owns its ordered products and their ingredients; they are
persisted embedded in the order document and never shared between orders.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- aiohttp
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional
from uuid import UUID, uuid4

from ..enums import OrderStatus, PaymentStatus, ProductCategory
from ..events import (
    DomainEvent,
    OrderItemAddedEvent,
    OrderItemRemovedEvent,
    OrderStartedEvent,
    OrderStatusChangedEvent,
)
from ..exceptions import IllegalTransitionError, OrderValidationError
from ..state_machine import OrderEvent, event_for, transition


MIN_INGREDIENT_QUANTITY = 0
MAX_INGREDIENT_QUANTITY = 10

CENTS = Decimal("0.01")


def _money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


def _clamp_ingredient_quantity(quantity: int) -> int:
    return max(MIN_INGREDIENT_QUANTITY, min(MAX_INGREDIENT_QUANTITY, quantity))


@dataclass
class OrderedProductIngredient:
    """Ingredient snapshot attached to an ordered product."""

    id: UUID
    name: str
    price: Decimal
    quantity: int
    ordered_product_id: Optional[UUID] = None
    base_ingredient_id: Optional[UUID] = None

    def __post_init__(self):
        self.quantity = _clamp_ingredient_quantity(self.quantity)

    def set_quantity(self, quantity: int) -> None:
        """Set quantity, clamped to [0, 10]."""
        self.quantity = _clamp_ingredient_quantity(quantity)

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


@dataclass
class OrderedProduct:
    """
    Line item within an order.

    Product name, category and base price are snapshots taken when the
    item was added, so later catalog edits never alter historical orders.
    """

    id: UUID
    product_id: UUID
    product_name: str
    category: ProductCategory
    base_price: Decimal
    quantity: int
    final_price: Decimal = Decimal("0.00")
    observation: Optional[str] = None
    custom_ingredients: List[OrderedProductIngredient] = field(default_factory=list)
    order_id: Optional[UUID] = None

    def calculate_final_price(self) -> Decimal:
        """(base price + sum of ingredient price * quantity) * item quantity."""
        ingredients_total = sum(
            (ingredient.subtotal for ingredient in self.custom_ingredients),
            Decimal("0"),
        )
        self.final_price = _money((self.base_price + ingredients_total) * self.quantity)
        return self.final_price

    def set_quantity(self, quantity: int) -> None:
        if quantity <= 0:
            raise OrderValidationError("Quantity must be greater than zero")
        self.quantity = quantity
        self.calculate_final_price()

    def set_ingredient_quantity(self, ingredient_id: UUID, quantity: int) -> None:
        """Clamp and apply quantity to one ingredient. Unknown ids are ignored."""
        for ingredient in self.custom_ingredients:
            if ingredient.id == ingredient_id:
                ingredient.set_quantity(quantity)
                self.calculate_final_price()
                return

    def set_observation(self, observation: Optional[str]) -> None:
        self.observation = observation.strip() if observation and observation.strip() else None

    def add_ingredient(self, ingredient: OrderedProductIngredient) -> None:
        ingredient.ordered_product_id = self.id
        self.custom_ingredients.append(ingredient)
        self.calculate_final_price()


@dataclass
class Order:
    """
    Order aggregate root.

    Invariant: total_price == sum(item.final_price for item in items),
    restored by every mutation through calculate_total().
    """

    id: UUID
    code: str
    created_at: datetime
    customer_id: Optional[UUID] = None
    status: OrderStatus = OrderStatus.STARTED
    payment_status: PaymentStatus = PaymentStatus.NOT_STARTED
    total_price: Decimal = Decimal("0.00")
    source: Optional[str] = None
    items: List[OrderedProduct] = field(default_factory=list)

    # Event collection, not part of the aggregate's value
    _domain_events: List[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    @classmethod
    def start(
        cls,
        code: str,
        customer_id: Optional[UUID] = None,
        source: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> "Order":
        """Open a new empty order in Started status."""
        order = cls(
            id=uuid4(),
            code=code,
            created_at=created_at or datetime.now(timezone.utc),
            customer_id=customer_id,
            source=source,
        )
        order._record_event(
            OrderStartedEvent(
                aggregate_id=str(order.id),
                code=code,
                customer_id=str(customer_id) if customer_id else None,
            )
        )
        return order

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def add_product(self, item: OrderedProduct) -> None:
        """Append item, set its back-reference and recalculate total."""
        item.order_id = self.id
        self.items.append(item)
        self.calculate_total()
        self._record_event(
            OrderItemAddedEvent(
                aggregate_id=str(self.id),
                ordered_product_id=str(item.id),
                product_id=str(item.product_id),
                quantity=item.quantity,
                final_price=item.final_price,
            )
        )

    def remove_product(self, ordered_product_id: UUID) -> None:
        """Remove item if present (no-op otherwise) and recalculate total."""
        item = self.find_product(ordered_product_id)
        if item is not None:
            self.items.remove(item)
            self._record_event(
                OrderItemRemovedEvent(
                    aggregate_id=str(self.id),
                    ordered_product_id=str(ordered_product_id),
                )
            )
        self.calculate_total()

    def find_product(self, ordered_product_id: UUID) -> Optional[OrderedProduct]:
        for item in self.items:
            if item.id == ordered_product_id:
                return item
        return None

    def calculate_total(self) -> Decimal:
        self.total_price = _money(
            sum((item.final_price for item in self.items), Decimal("0"))
        )
        return self.total_price

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def finalize_selection(self) -> None:
        """Move Started -> AwaitingPayment."""
        self._apply(OrderEvent.CONFIRM_SELECTION)

    def revert_selection(self, previous_status: OrderStatus) -> None:
        """
        Compensate a failed payment initiation.

        Args:
            previous_status: Status captured before finalize_selection()

        Raises:
            IllegalTransitionError: The order is not awaiting payment, or
                previous_status is not the compensation target
        """
        target = transition(self.status, OrderEvent.REVERT_SELECTION)
        if target != previous_status:
            raise IllegalTransitionError(self.status.name, previous_status.name)
        self._apply(OrderEvent.REVERT_SELECTION)

    def update_status(self, status: OrderStatus) -> None:
        """Move to `status` if an edge leads there from the current status."""
        event = event_for(self.status, status)
        if event is None:
            raise IllegalTransitionError(self.status.name, status.name)
        self._apply(event)

    def _apply(self, event: OrderEvent) -> None:
        previous = self.status
        self.status = transition(previous, event)

        if event == OrderEvent.CONFIRM_SELECTION:
            self.payment_status = PaymentStatus.AWAITING_PAYMENT
        elif event == OrderEvent.REVERT_SELECTION:
            self.payment_status = PaymentStatus.NOT_STARTED
        elif event == OrderEvent.CONFIRM_PAYMENT:
            self.payment_status = PaymentStatus.PAID

        self._record_event(
            OrderStatusChangedEvent(
                aggregate_id=str(self.id),
                previous_status=int(previous),
                new_status=int(self.status),
                trigger=event.value,
            )
        )

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def get_domain_events(self) -> List[DomainEvent]:
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        self._domain_events.clear()
