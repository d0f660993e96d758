"""Order repository over a cursor-only document store."""

import logging
from typing import List, Optional
from uuid import UUID

from orderhub.domain.entities import Order
from orderhub.domain.enums import OrderStatus
from orderhub.domain.repositories import OrderPage, OrderRepository

from .. import attributes as attr
from ..codec import OrderDocumentCodec
from ..order_code import OrderCodeGenerator
from ..pagination import paginate
from ..stores.interface import DocumentStore, IndexDefinition


logger = logging.getLogger(__name__)

ORDER_INDEXES = (
    IndexDefinition(attr.CUSTOMER_INDEX, attr.CUSTOMER_ID, attr.CREATED_AT),
    IndexDefinition(attr.STATUS_INDEX, attr.ORDER_STATUS, attr.CREATED_AT),
    IndexDefinition(attr.CODE_INDEX, attr.CODE, attr.ORDER_ID),
)

QUERY_BATCH_SIZE = 100


class DocumentOrderRepository(OrderRepository):
    """
    Concrete OrderRepository.

    Responsibilities:
    - Encode/decode orders through OrderDocumentCodec
    - Enforce the size guard on every write
    - Serve page/page_size reads via the pagination helper
    - Generate unique order codes through the code index
    """

    def __init__(
        self,
        store: DocumentStore,
        codec: Optional[OrderDocumentCodec] = None,
        code_generator: Optional[OrderCodeGenerator] = None,
        code_prefix: str = "ORD",
        code_max_attempts: int = 10,
    ) -> None:
        """Initialize repository.

        Args:
            store: Document store holding the orders table
            codec: Order codec (default 400 KB size ceiling)
            code_generator: Code generator; defaults to one probing this repository
            code_prefix: Prefix for the default code generator
            code_max_attempts: Attempt ceiling for the default code generator
        """
        self._store = store
        self._codec = codec or OrderDocumentCodec()
        self._code_generator = code_generator or OrderCodeGenerator(
            self.exists_by_code, prefix=code_prefix, max_attempts=code_max_attempts
        )

    async def get_by_id(self, order_id: UUID) -> Optional[Order]:
        doc = await self._store.get_item(str(order_id))
        return self._codec.from_document(doc) if doc else None

    async def get_by_customer_id(self, customer_id: UUID) -> List[Order]:
        return await self._query_all(attr.CUSTOMER_INDEX, str(customer_id))

    async def get_by_status(self, status: OrderStatus) -> List[Order]:
        return await self._query_all(attr.STATUS_INDEX, str(int(status)))

    async def get_by_status_without_preparation(self, status: OrderStatus) -> List[Order]:
        orders = await self.get_by_status(status)
        return [o for o in orders if o.status != OrderStatus.IN_PREPARATION]

    async def get_paged(
        self, page: int, page_size: int, status: Optional[OrderStatus] = None
    ) -> OrderPage:
        if status is not None:
            async def fetch(token, limit):
                return await self._store.query(attr.STATUS_INDEX, str(int(status)), limit, token)
        else:
            async def fetch(token, limit):
                return await self._store.scan(limit, token)

        window = await paginate(fetch, page, page_size, transform=self._codec.from_document)
        return OrderPage(
            items=window.items,
            page=page,
            page_size=page_size,
            has_next_page=window.has_next_page,
            last_token=window.last_token,
        )

    async def add(self, order: Order) -> None:
        self._codec.validate_size(order)
        await self._store.put_item(self._codec.to_document(order))
        logger.info(f"[{order.id}] Order added (code={order.code})")
        self._release_events(order)

    async def update(self, order: Order) -> None:
        self._codec.validate_size(order)
        await self._store.put_item(self._codec.to_document(order))
        logger.info(f"[{order.id}] Order updated (status={order.status.name})")
        self._release_events(order)

    async def delete(self, order_id: UUID) -> None:
        await self._store.delete_item(str(order_id))
        logger.info(f"[{order_id}] Order deleted")

    async def exists(self, order_id: UUID) -> bool:
        return await self._store.get_item(str(order_id)) is not None

    async def exists_by_code(self, code: str) -> bool:
        result = await self._store.query(attr.CODE_INDEX, code, limit=1)
        return bool(result.items)

    async def generate_order_code(self) -> str:
        return await self._code_generator.generate()

    @staticmethod
    def _release_events(order: Order) -> None:
        for event in order.get_domain_events():
            logger.debug(f"[{order.id}] {event.event_type} persisted")
        order.clear_domain_events()

    async def _query_all(self, index_name: str, key_value: str) -> List[Order]:
        orders: List[Order] = []
        token = None
        while True:
            result = await self._store.query(index_name, key_value, QUERY_BATCH_SIZE, token)
            orders.extend(self._codec.from_document(doc) for doc in result.items)
            token = result.next_token
            if token is None:
                return orders
