"""Database engine initialization."""

import structlog
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from sleep_monitor_server.core.config import settings

logger = structlog.get_logger()


def create_engine(database_url: str | None = None) -> AsyncEngine:
    """Create the async database engine.

    Args:
        database_url: Override for ``settings.database_url``

    Returns:
        Async SQLAlchemy engine
    """
    url = database_url or settings.database_url

    # SQLite drivers don't take queue pool sizing
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=False)

    return create_async_engine(
        url,
        echo=False,
        pool_size=10,
        max_overflow=20,
        pool_recycle=300,  # Recycle connections every 5 minutes
    )


# Global engine
engine = create_engine()


async def init_database(db_engine: AsyncEngine | None = None) -> None:
    """Verify the database is reachable and migrations have been applied.

    Does NOT create tables - use Alembic migrations for schema management.

    Args:
        db_engine: Engine to check, defaults to the global engine
    """
    db_engine = db_engine or engine

    async with db_engine.connect() as conn:
        has_migrations = await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).has_table("alembic_version")
        )

    if not has_migrations:
        logger.warning(
            "Database migrations have not been applied. "
            "Run 'alembic upgrade head' to initialize the database schema."
        )
    else:
        logger.info("Database initialized")


async def close_database(db_engine: AsyncEngine | None = None) -> None:
    """Close database connection pool."""
    await (db_engine or engine).dispose()
