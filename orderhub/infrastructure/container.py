"""
Application wiring.

Builds repositories, services and the confirmation use case from
AppSettings. The HTTP layer (external) creates one container per process
and one RequestContext per request.
"""
from typing import Optional

import aiohttp
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from orderhub.application.interfaces import IRequestContext
from orderhub.application.services import OrderApplicationService, OrderSnapshotBuilder
from orderhub.application.use_cases import ConfirmOrderSelectionUseCase
from orderhub.data import attributes as attr
from orderhub.data.codec import OrderDocumentCodec
from orderhub.data.repositories import (
    ORDER_INDEXES,
    DocumentOrderRepository,
    InMemoryProductRepository,
)
from orderhub.data.stores import DocumentStore, SqlAlchemyDocumentStore
from orderhub.domain.repositories import ProductRepository
from orderhub.infrastructure.adapters.payment import PaymentServiceClient
from orderhub.infrastructure.database import (
    close_database,
    create_engine,
    get_session_factory,
    init_database,
)
from orderhub.infrastructure.logging import get_logger
from orderhub.settings import AppSettings, get_app_settings


logger = get_logger(__name__)


def build_order_repository(settings: AppSettings, store: DocumentStore) -> DocumentOrderRepository:
    """Order repository with codec and code generator configured from settings."""
    return DocumentOrderRepository(
        store,
        codec=OrderDocumentCodec(max_item_size_kb=settings.store.max_item_size_kb),
        code_prefix=settings.order_code.prefix,
        code_max_attempts=settings.order_code.max_attempts,
    )


class OrderHubContainer:
    """Holds process-wide collaborators."""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        product_repository: Optional[ProductRepository] = None,
        http_session: Optional[aiohttp.ClientSession] = None,
    ):
        self.settings = settings or get_app_settings()
        self.product_repository = product_repository or InMemoryProductRepository()
        self.http_session = http_session
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker] = None
        self.order_repository: Optional[DocumentOrderRepository] = None

    async def start(self) -> None:
        self.engine = create_engine(self.settings.store)
        await init_database(self.engine)
        self.session_factory = get_session_factory(self.engine)
        store = SqlAlchemyDocumentStore(
            self.session_factory,
            table_name=self.settings.store.orders_table,
            key_attribute=attr.ORDER_ID,
            indexes=ORDER_INDEXES,
        )
        self.order_repository = build_order_repository(self.settings, store)
        logger.info(f"OrderHub started (table={self.settings.store.orders_table})")

    async def stop(self) -> None:
        await close_database(self.engine)
        self.engine = None

    def order_service(self) -> OrderApplicationService:
        return OrderApplicationService(self.order_repository, self.product_repository)

    def confirm_order_selection(self, request_context: IRequestContext) -> ConfirmOrderSelectionUseCase:
        return ConfirmOrderSelectionUseCase(
            order_repository=self.order_repository,
            payment_client=PaymentServiceClient(self.settings.payment, session=self.http_session),
            request_context=request_context,
            snapshot_builder=OrderSnapshotBuilder(currency=self.settings.payment.currency),
        )
