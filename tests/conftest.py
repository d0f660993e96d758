"""Shared fixtures: entity builders and in-memory stores."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from orderhub.data import attributes as attr
from orderhub.data.repositories import ORDER_INDEXES, DocumentOrderRepository
from orderhub.data.stores import InMemoryDocumentStore
from orderhub.domain.entities import (
    Order,
    OrderedProduct,
    OrderedProductIngredient,
    Product,
    ProductBaseIngredient,
)
from orderhub.domain.enums import ProductCategory


@pytest.fixture
def make_item():
    """Build an OrderedProduct with priced ingredients."""

    def _make(base_price="10.00", quantity=1, ingredients=(), name="X-Burger", observation=None):
        item = OrderedProduct(
            id=uuid4(),
            product_id=uuid4(),
            product_name=name,
            category=ProductCategory.MEAL,
            base_price=Decimal(base_price),
            quantity=quantity,
            observation=observation,
        )
        for ing_name, price, qty in ingredients:
            item.add_ingredient(
                OrderedProductIngredient(
                    id=uuid4(),
                    name=ing_name,
                    price=Decimal(price),
                    quantity=qty,
                    base_ingredient_id=uuid4(),
                )
            )
        item.calculate_final_price()
        return item

    return _make


@pytest.fixture
def make_order(make_item):
    """Build a Started order, optionally with items."""

    def _make(items=(), code="ORD202610191234", customer_id=None, source="totem"):
        order = Order.start(
            code=code,
            customer_id=customer_id,
            source=source,
            created_at=datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc),
        )
        for item in items:
            order.add_product(item)
        return order

    return _make


@pytest.fixture
def burger_product():
    product_id = uuid4()
    return Product(
        id=product_id,
        name="X-Bacon",
        category=ProductCategory.MEAL,
        price=Decimal("20.00"),
        base_ingredients=[
            ProductBaseIngredient(id=uuid4(), name="Bacon", price=Decimal("3.00"), product_id=product_id),
            ProductBaseIngredient(id=uuid4(), name="Cheese", price=Decimal("2.00"), product_id=product_id),
        ],
    )


@pytest.fixture
def order_store():
    return InMemoryDocumentStore(attr.ORDERS_TABLE, attr.ORDER_ID, ORDER_INDEXES)


@pytest.fixture
def order_repository(order_store):
    return DocumentOrderRepository(order_store)
