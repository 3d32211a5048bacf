"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from blogapi.configs import file_logger, settings
from blogapi.errors.base import BaseAppError
from blogapi.errors.database import DatabaseInitializationError

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000


def engine_kwargs(database_url: str) -> dict[str, Any]:
    """
    Build `create_async_engine` keyword arguments for the configured driver.

    Pool sizing and server-side timeouts only apply to PostgreSQL (asyncpg);
    SQLite (aiosqlite) is used with the driver defaults.

    Args:
        database_url: SQLAlchemy async database URL.

    Returns:
        dict[str, Any]: Engine options.
    """
    kwargs: dict[str, Any] = {"echo": settings.DATABASE_ECHO}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        return kwargs

    kwargs.update(
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
        pool_pre_ping=True,
        connect_args={
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        },
    )
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


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    **engine_kwargs(settings.DATABASE_URL),
)

if settings.DEBUG:
    _configure_engine_events(engine)

async_session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
    engine,
    class_=SQLModelAsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    One session (and one transaction) per request: every write a route makes
    is committed together when the route returns, or rolled back together
    when it raises.

    Yields:
        AsyncSession: Database session
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            session.add(UserDB(username="alice"))
            # Commits on successful exit, rolls back on exception
        ```
    """
    async with async_session_maker() as session:
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
        finally:
            await session.close()


async def check_db() -> bool:
    """Return True when a trivial query succeeds."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database health check failed")
        return False
    return True


async def init_db() -> None:
    """
    Initialize database tables.

    Creates all tables defined in SQLModel models. Production schemas are
    managed by Alembic (see `alembic/`).
    """
    try:
        async with engine.begin() as conn:
            # Import all models to ensure they are registered
            from blogapi.models import BlogDB, UserDB  # noqa: F401, PLC0415

            await conn.run_sync(SQLModel.metadata.create_all)
    except SQLAlchemyError as e:
        logger.exception("Database initialization failed")
        raise DatabaseInitializationError from e
    logger.info("Database initialized successfully!")


async def close_db() -> None:
    """
    Close database connections.

    Called on application shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")
