"""Tests for order status transitions."""

import pytest

from orderhub.domain.enums import OrderStatus, PaymentStatus
from orderhub.domain.events import OrderStatusChangedEvent
from orderhub.domain.exceptions import BusinessRuleError, IllegalTransitionError
from orderhub.domain.state_machine import OrderEvent, can_transition, transition


def test_happy_path_through_lifecycle():
    status = OrderStatus.STARTED
    for event in (
        OrderEvent.CONFIRM_SELECTION,
        OrderEvent.CONFIRM_PAYMENT,
        OrderEvent.SEND_TO_KITCHEN,
        OrderEvent.MARK_READY,
        OrderEvent.COMPLETE,
    ):
        status = transition(status, event)

    assert status == OrderStatus.COMPLETED


def test_revert_selection_is_the_only_backwards_edge():
    assert transition(OrderStatus.AWAITING_PAYMENT, OrderEvent.REVERT_SELECTION) == OrderStatus.STARTED
    assert not can_transition(OrderStatus.IN_PREPARATION, OrderStatus.STARTED)
    assert not can_transition(OrderStatus.COMPLETED, OrderStatus.READY_FOR_PICKUP)


@pytest.mark.parametrize(
    "current, event",
    [
        (OrderStatus.STARTED, OrderEvent.CONFIRM_PAYMENT),
        (OrderStatus.AWAITING_PAYMENT, OrderEvent.CONFIRM_SELECTION),
        (OrderStatus.COMPLETED, OrderEvent.CANCEL),
        (OrderStatus.IN_PREPARATION, OrderEvent.CANCEL),
        (OrderStatus.CANCELLED, OrderEvent.REVERT_SELECTION),
    ],
)
def test_illegal_transitions_raise(current, event):
    with pytest.raises(IllegalTransitionError) as exc_info:
        transition(current, event)

    assert isinstance(exc_info.value, BusinessRuleError)


def test_finalize_selection_moves_to_awaiting_payment(make_order, make_item):
    order = make_order(items=[make_item()])

    order.finalize_selection()

    assert order.status == OrderStatus.AWAITING_PAYMENT
    assert order.payment_status == PaymentStatus.AWAITING_PAYMENT
    changes = [e for e in order.get_domain_events() if isinstance(e, OrderStatusChangedEvent)]
    assert changes[-1].previous_status == OrderStatus.STARTED
    assert changes[-1].new_status == OrderStatus.AWAITING_PAYMENT


def test_finalize_selection_twice_is_rejected(make_order, make_item):
    order = make_order(items=[make_item()])
    order.finalize_selection()

    with pytest.raises(IllegalTransitionError):
        order.finalize_selection()


def test_revert_selection_restores_captured_status(make_order, make_item):
    order = make_order(items=[make_item()])
    previous = order.status
    order.finalize_selection()

    order.revert_selection(previous)

    assert order.status == OrderStatus.STARTED
    assert order.payment_status == PaymentStatus.NOT_STARTED


def test_revert_selection_rejects_wrong_target(make_order, make_item):
    order = make_order(items=[make_item()])
    order.finalize_selection()

    with pytest.raises(IllegalTransitionError):
        order.revert_selection(OrderStatus.COMPLETED)

    assert order.status == OrderStatus.AWAITING_PAYMENT


def test_update_status_follows_edges(make_order):
    order = make_order()

    order.update_status(OrderStatus.AWAITING_PAYMENT)
    order.update_status(OrderStatus.PAYMENT_CONFIRMED)

    assert order.payment_status == PaymentStatus.PAID
    with pytest.raises(IllegalTransitionError):
        order.update_status(OrderStatus.COMPLETED)


def test_cancel_allowed_before_kitchen(make_order):
    order = make_order()

    order.update_status(OrderStatus.CANCELLED)

    assert order.status == OrderStatus.CANCELLED
