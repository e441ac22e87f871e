"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from app.configs import file_logger, settings
from app.errors.database import DatabaseInitializationError

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000


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


def engine_kwargs(database_url: str) -> dict[str, Any]:
    """
    Build ``create_async_engine`` keyword arguments for a database URL.

    Statement and lock timeouts are only understood by asyncpg; other
    drivers get the plain pool settings.

    Args:
        database_url: SQLAlchemy URL, e.g. ``postgresql+asyncpg://...``

    Returns:
        dict[str, Any]: Keyword arguments for the engine factory
    """
    kwargs: dict[str, Any] = {
        "echo": settings.DATABASE_ECHO,
        "pool_pre_ping": True,
    }
    if make_url(database_url).get_backend_name() != "postgresql":
        return kwargs

    kwargs.update(
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
        connect_args={
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        },
    )
    return kwargs


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
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    One session, and one transaction, per request: the session commits when
    the route returns and rolls back when anything raises. Routes take it
    with ``scope="function"`` so the commit finishes before the response is
    sent.

    Yields:
        AsyncSession: Database session

    Example:
        ```python
        @app.get("/users")
        async def get_users(session: AsyncSession = Depends(get_session, scope="function")):
            result = await session.execute(select(UserDB))
            return result.scalars().all()
        ```
    """
    async with transaction() as session:
        yield session


@asynccontextmanager
async def transaction(
    session_maker: async_sessionmaker[SQLModelAsyncSession] | None = None,
) -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Args:
        session_maker: Session factory to use, the application one by default

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            session.add(FollowDB(follower_id=1, following_id=2))
            # Commits on successful exit, rolls back on exception
        ```
    """
    async with (session_maker or async_session_maker)() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            logger.exception("Transaction error")
            raise
        finally:
            await session.close()


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    Create all tables defined in SQLModel models.

    Raises:
        DatabaseInitializationError: If the schema cannot be created

    Note:
        Production schemas are managed by Alembic; this is for development
        databases and test fixtures.
    """
    try:
        async with (bind or engine).begin() as conn:
            # Import all models to ensure they are registered
            import app.models  # noqa: F401, PLC0415

            await conn.run_sync(SQLModel.metadata.create_all)
    except SQLAlchemyError as e:
        logger.exception("Database initialization failed")
        raise DatabaseInitializationError from e
    logger.info("Database initialized successfully!")


async def close_db() -> None:
    """Dispose of the connection pool on shutdown."""
    await engine.dispose()
    logger.info("Database connections closed")
