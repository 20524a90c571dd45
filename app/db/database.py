"""Record store engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from orjson import dumps, loads
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.configs import Settings, file_logger
from app.errors.base import BaseAppError
from app.errors.database import StoreInitializationError

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000


def _json_serializer(value: Any) -> str:
    return dumps(value).decode()


def engine_kwargs(settings: Settings) -> dict[str, Any]:
    """
    Build ``create_async_engine`` keyword arguments for the configured store.

    SQLite shares one connection so that in-memory stores live as long as the
    engine; server stores get a sized pool and statement timeouts.
    """
    kwargs: dict[str, Any] = {
        "echo": settings.DATABASE_ECHO,
        "json_serializer": _json_serializer,
        "json_deserializer": loads,
    }
    if settings.DATABASE_URL.startswith("sqlite"):
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
        return kwargs

    kwargs.update(
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
        pool_pre_ping=True,
    )
    if settings.DATABASE_URL.startswith("postgresql+asyncpg"):
        kwargs["connect_args"] = {
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        }
    return kwargs


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkout")
    def on_checkout(
        dbapi_connection: object,
        connection_record: object,
        connection_proxy: object,
    ) -> None:
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


class Database:
    """
    Handle on the record store.

    Owns the async engine and session factory. One instance is created per
    application at startup and passed to the routes through dependencies.
    """

    def __init__(self, settings: Settings) -> None:
        self.engine: AsyncEngine = create_async_engine(
            settings.DATABASE_URL,
            **engine_kwargs(settings),
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
    async def session(self) -> AsyncGenerator[AsyncSession]:
        """
        Context manager for a transactional session.

        Yields:
            AsyncSession: Session committed on successful exit, rolled back on error

        Example:
            ```python
            async with database.session() as session:
                await PostRepository(session).delete_all()
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

    async def init(self) -> None:
        """
        Create the ``posts`` table if it does not exist.

        Raises:
            StoreInitializationError: If the schema cannot be created
        """
        # Import models so they are registered on the metadata
        from app.models import PostDB  # noqa: F401, PLC0415

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            raise StoreInitializationError(detail=f"Failed to initialize the store: {e}") from e
        logger.info("Database initialized successfully!")

    async def ping(self) -> bool:
        """Return True when the store answers a trivial query."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            logger.exception("Database ping failed")
            return False
        return True

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")
