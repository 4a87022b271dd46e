"""INBOUND WMS - Async SQLAlchemy session, engine and unit-of-work helpers."""
import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from inbound_wms.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

engine = create_async_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
    echo=settings.DEBUG,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency: yield async DB session.
    Services run their own units of work; anything left pending is committed here.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


@asynccontextmanager
async def transaction(db: AsyncSession, operation: str, **context: Any) -> AsyncIterator[AsyncSession]:
    """
    Scoped unit of work around ``db``.

    Commits when the block exits normally. On any exception the transaction is
    rolled back, the failure is logged with the operation name and identifiers,
    and the original exception is re-raised.
    """
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        logger.error(
            "%s rolled back",
            operation,
            extra={"operation": operation, **context},
            exc_info=True,
        )
        raise


async def lock_row(db: AsyncSession, stmt: Select) -> Any | None:
    """
    SELECT ... FOR UPDATE a single row.

    populate_existing makes the locked row's committed values win over any copy
    already sitting in the identity map.
    """
    result = await db.execute(
        stmt.with_for_update().execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()
