"""End-to-end repository tests over the SQLAlchemy document store."""

from decimal import Decimal
from uuid import uuid4

import pytest

from orderhub.data.codec import OrderDocumentCodec
from orderhub.data.repositories import DocumentOrderRepository
from orderhub.domain.enums import OrderStatus
from orderhub.domain.exceptions import ItemSizeExceededError


@pytest.fixture
def sql_repository(sql_order_store):
    return DocumentOrderRepository(sql_order_store)


@pytest.mark.asyncio
async def test_order_round_trips_through_database(sql_repository, make_order, make_item):
    order = make_order(
        items=[
            make_item(base_price="10.00", quantity=2),
            make_item(base_price="5.00", ingredients=[("Egg", "1.00", 3)], observation="runny"),
        ],
        customer_id=uuid4(),
    )

    await sql_repository.add(order)
    loaded = await sql_repository.get_by_id(order.id)

    assert loaded == order
    assert loaded.total_price == Decimal("28.00")


@pytest.mark.asyncio
async def test_paging_and_status_queries(sql_repository, make_order, make_item):
    orders = [make_order(code=f"ORD20261019{3000 + n}", items=[make_item()]) for n in range(25)]
    for n, order in enumerate(orders):
        if n < 4:
            order.finalize_selection()
        await sql_repository.add(order)

    page2 = await sql_repository.get_paged(2, 10)
    page3 = await sql_repository.get_paged(3, 10)
    awaiting = await sql_repository.get_by_status(OrderStatus.AWAITING_PAYMENT)

    assert [o.id for o in page2.items] == [o.id for o in orders[10:20]]
    assert page2.has_next_page is True
    assert len(page3.items) == 5
    assert page3.has_next_page is False
    assert {o.id for o in awaiting} == {o.id for o in orders[:4]}


@pytest.mark.asyncio
async def test_exists_and_delete(sql_repository, make_order):
    order = make_order(code="ORD202610197777")
    await sql_repository.add(order)

    assert await sql_repository.exists(order.id)
    assert await sql_repository.exists_by_code("ORD202610197777")

    await sql_repository.delete(order.id)

    assert not await sql_repository.exists(order.id)
    assert not await sql_repository.exists_by_code("ORD202610197777")


@pytest.mark.asyncio
async def test_oversized_order_is_not_written(sql_order_store, make_order, make_item):
    repository = DocumentOrderRepository(sql_order_store, codec=OrderDocumentCodec(max_item_size_kb=1))
    order = make_order(items=[make_item(observation="y" * 5000)])

    with pytest.raises(ItemSizeExceededError):
        await repository.add(order)

    assert not await repository.exists(order.id)
