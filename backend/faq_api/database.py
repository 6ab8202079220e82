"""Async SQLAlchemy engine and session factory."""
import logging
import time
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from faq_api.config import settings
from faq_api.models.base import Base

logger = logging.getLogger(__name__)

SLOW_QUERY_THRESHOLD_MS = 500  # Log queries slower than 500ms


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """Create an async engine with SQLite pragmas and slow query logging attached."""
    new_engine = create_async_engine(url, **kwargs)
    _attach_listeners(new_engine)
    return new_engine


def _attach_listeners(target: AsyncEngine) -> None:
    sync_engine = target.sync_engine

    if sync_engine.dialect.name == "sqlite":
        @event.listens_for(sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    # ── Slow Query Logging ──────────────────────────────────────────────

    @event.listens_for(sync_engine, "before_cursor_execute")
    def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        conn.info["query_start_time"] = time.perf_counter()

    @event.listens_for(sync_engine, "after_cursor_execute")
    def _after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
        start = conn.info.pop("query_start_time", None)
        if start is None:
            return
        elapsed_ms = (time.perf_counter() - start) * 1000
        if elapsed_ms >= SLOW_QUERY_THRESHOLD_MS:
            logger.warning(
                "Slow query detected: %.1fms: %s",
                elapsed_ms,
                statement[:200],
            )


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_models(target: AsyncEngine = engine) -> None:
    """Create the faqs, tags and faq_tags tables if they do not exist yet."""
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
