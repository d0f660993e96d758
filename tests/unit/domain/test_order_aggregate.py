"""Tests for the Order aggregate: pricing, clamping and item handling."""

from decimal import Decimal
from uuid import uuid4

import pytest

from orderhub.domain.entities import OrderedProductIngredient
from orderhub.domain.enums import OrderStatus, PaymentStatus
from orderhub.domain.events import OrderItemAddedEvent, OrderStartedEvent
from orderhub.domain.exceptions import OrderValidationError


def test_new_order_is_started_empty_and_zero(make_order):
    order = make_order()

    assert order.status == OrderStatus.STARTED
    assert order.payment_status == PaymentStatus.NOT_STARTED
    assert order.items == []
    assert order.total_price == Decimal("0.00")
    assert isinstance(order.get_domain_events()[0], OrderStartedEvent)


def test_end_to_end_pricing_and_removal(make_order, make_item):
    """A: 10.00 x2 = 20.00; B: (5.00 + 1.00*3) x1 = 8.00; total 28.00, then 8.00."""
    item_a = make_item(base_price="10.00", quantity=2)
    item_b = make_item(base_price="5.00", quantity=1, ingredients=[("Egg", "1.00", 3)])

    order = make_order(items=[item_a, item_b])

    assert item_a.final_price == Decimal("20.00")
    assert item_b.final_price == Decimal("8.00")
    assert order.total_price == Decimal("28.00")

    order.remove_product(item_a.id)

    assert order.total_price == Decimal("8.00")
    assert [i.id for i in order.items] == [item_b.id]


def test_final_price_multiplies_ingredients_by_item_quantity(make_item):
    item = make_item(base_price="5.00", quantity=2, ingredients=[("Egg", "1.00", 3)])

    assert item.final_price == Decimal("16.00")


def test_add_product_sets_back_reference_and_records_event(make_order, make_item):
    order = make_order()
    item = make_item()

    order.add_product(item)

    assert item.order_id == order.id
    assert any(isinstance(e, OrderItemAddedEvent) for e in order.get_domain_events())


def test_remove_unknown_product_is_noop(make_order, make_item):
    order = make_order(items=[make_item(base_price="7.50")])

    order.remove_product(uuid4())

    assert len(order.items) == 1
    assert order.total_price == Decimal("7.50")


def test_total_matches_sum_after_mixed_operations(make_order, make_item):
    order = make_order()
    items = [make_item(base_price=p, quantity=q) for p, q in [("3.10", 1), ("4.25", 3), ("9.99", 2)]]
    for item in items:
        order.add_product(item)
    order.remove_product(items[1].id)
    order.add_product(make_item(base_price="1.05", quantity=4))

    assert order.total_price == sum(i.final_price for i in order.items)


@pytest.mark.parametrize("requested, expected", [(-5, 0), (15, 10), (7, 7), (0, 0), (10, 10)])
def test_ingredient_quantity_is_clamped(make_item, requested, expected):
    item = make_item(ingredients=[("Onion", "0.50", 1)])
    ingredient = item.custom_ingredients[0]

    item.set_ingredient_quantity(ingredient.id, requested)

    assert ingredient.quantity == expected


def test_ingredient_quantity_clamped_on_construction():
    ingredient = OrderedProductIngredient(id=uuid4(), name="Salt", price=Decimal("0.10"), quantity=42)

    assert ingredient.quantity == 10


def test_set_ingredient_quantity_recomputes_final_price(make_item):
    item = make_item(base_price="10.00", ingredients=[("Bacon", "3.00", 1)])

    item.set_ingredient_quantity(item.custom_ingredients[0].id, 2)

    assert item.final_price == Decimal("16.00")


def test_set_ingredient_quantity_unknown_id_is_noop(make_item):
    item = make_item(base_price="10.00", ingredients=[("Bacon", "3.00", 1)])

    item.set_ingredient_quantity(uuid4(), 5)

    assert item.custom_ingredients[0].quantity == 1
    assert item.final_price == Decimal("13.00")


def test_set_quantity_recomputes_and_rejects_non_positive(make_item):
    item = make_item(base_price="4.00")

    item.set_quantity(3)
    assert item.final_price == Decimal("12.00")

    with pytest.raises(OrderValidationError):
        item.set_quantity(0)


def test_set_observation_blank_becomes_none(make_item):
    item = make_item()

    item.set_observation("  no onions ")
    assert item.observation == "no onions"

    item.set_observation("   ")
    assert item.observation is None
