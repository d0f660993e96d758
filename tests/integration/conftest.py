"""Pytest configuration and fixtures for integration tests."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from orderhub.data import attributes as attr
from orderhub.data.models import Base
from orderhub.data.repositories import ORDER_INDEXES
from orderhub.data.stores import SqlAlchemyDocumentStore


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def sql_order_store(test_session_factory):
    yield SqlAlchemyDocumentStore(
        test_session_factory,
        table_name=attr.ORDERS_TABLE,
        key_attribute=attr.ORDER_ID,
        indexes=ORDER_INDEXES,
    )
