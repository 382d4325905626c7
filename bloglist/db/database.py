"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from bloglist.configs import Settings
from bloglist.errors import BaseAppError
from bloglist.monitoring import get_logger

logger = get_logger(__name__)

STATEMENT_TIMEOUT_MS = 30000


def _engine_kwargs(settings: Settings) -> dict[str, Any]:
    """Build engine options for the configured backend."""
    if settings.is_sqlite:
        return {"connect_args": {"check_same_thread": False}}

    return {
        "pool_size": settings.POOL_SIZE,
        "max_overflow": settings.MAX_OVERFLOW,
        "pool_timeout": settings.POOL_TIMEOUT,
        "pool_recycle": settings.POOL_RECYCLE,
        "pool_pre_ping": True,
        "connect_args": {
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        },
    }


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


class Database:
    """
    Engine and session factory built from the application settings.

    One instance is created per application and kept on ``app.state.db``.
    """

    def __init__(self, settings: Settings) -> None:
        self.engine: AsyncEngine = create_async_engine(
            settings.DATABASE_URL,
            echo=settings.DATABASE_ECHO,
            **_engine_kwargs(settings),
        )
        if settings.DEBUG:
            _configure_engine_events(self.engine)

        self.session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        """
        Context manager for explicit transaction management.

        Yields:
            AsyncSession: Database session within a transaction

        Example:
            ```python
            async with db.transaction() as session:
                session.add(BlogDB(title="Title", url="https://example.com", likes=0))
                # Commits on successful exit, rolls back on exception
            ```
        """
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except BaseAppError:
                await session.rollback()
                raise
            except Exception:
                await session.rollback()
                logger.exception("Transaction error")
                raise

    async def create_all(self) -> None:
        """
        Create all tables defined in SQLModel models.

        Note:
            This is a simple initialization; it never alters existing tables.
        """
        async with self.engine.begin() as conn:
            # Import all models to ensure they are registered
            from bloglist.models import BlogDB, UserDB  # noqa: F401, PLC0415

            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized successfully!")

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")
