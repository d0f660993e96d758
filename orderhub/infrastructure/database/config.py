"""
Database configuration.

Manages engine creation and table initialization for the relational
document store.
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from orderhub.data.models import Base
from orderhub.infrastructure.logging import get_logger
from orderhub.settings.order_store_settings import OrderStoreSettings


logger = get_logger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def create_engine(settings: OrderStoreSettings) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    In-memory SQLite gets a StaticPool so every session sees the same
    database.

    Args:
        settings: Store settings carrying the database URL

    Returns:
        Configured async engine
    """
    logger.info(f"Creating database engine: {settings.database_url}")

    kwargs = {"echo": settings.echo_sql}
    if settings.database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in settings.database_url:
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    return create_async_engine(settings.database_url, **kwargs)


# =============================================================================
# SESSION FACTORY
# =============================================================================

def get_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """
    Get session factory.

    Returns:
        Session factory for creating sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


# =============================================================================
# DATABASE INITIALIZATION
# =============================================================================

async def init_database(engine: AsyncEngine) -> None:
    """Create the document tables if they don't exist."""
    logger.info("Initializing database...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized")


async def close_database(engine: Optional[AsyncEngine]) -> None:
    """Close database connections."""
    if engine is not None:
        logger.info("Closing database connections...")
        await engine.dispose()
