"""Litestar application factory."""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

import structlog
from advanced_alchemy.extensions.litestar import (
    AsyncSessionConfig,
    SQLAlchemyAsyncConfig,
    SQLAlchemyPlugin,
)
from litestar import Litestar
from litestar.openapi import OpenAPIConfig
from sqlalchemy.ext.asyncio import AsyncEngine

from sleep_monitor_server import __version__
from sleep_monitor_server.api import api_routers
from sleep_monitor_server.core import database
from sleep_monitor_server.core.config import settings
from sleep_monitor_server.core.logging import configure_logging
from sleep_monitor_server.routes import root_redirect

configure_logging()

logger = structlog.get_logger()


def make_lifespan(
    db_engine: AsyncEngine,
) -> Callable[[Litestar], AbstractAsyncContextManager[None]]:
    """Build the lifespan manager for an engine.

    Handles startup and shutdown tasks:
    - Verify database migrations on startup
    - Close database connections on shutdown
    """

    @asynccontextmanager
    async def lifespan(app: Litestar) -> AsyncIterator[None]:
        logger.info(
            "Starting sleep-monitor-server",
            version=__version__,
            api_prefix=settings.api_prefix,
            refresh_seconds=settings.dashboard_refresh_seconds,
        )

        await database.init_database(db_engine)

        yield

        await database.close_database(db_engine)
        logger.info("Shutdown complete")

    return lifespan


def create_app(db_engine: AsyncEngine | None = None) -> Litestar:
    """Create Litestar application.

    Args:
        db_engine: Engine to use instead of the global one (tests pass SQLite)

    Returns:
        Configured Litestar app instance
    """
    db_engine = db_engine or database.engine

    return Litestar(
        route_handlers=[root_redirect, *api_routers],
        lifespan=[make_lifespan(db_engine)],
        openapi_config=OpenAPIConfig(
            title="sleep-monitor-server API",
            version=__version__,
            description="Sensor ingestion and sleep analytics for a bedside sleep monitor",
        ),
        plugins=[
            SQLAlchemyPlugin(
                config=SQLAlchemyAsyncConfig(
                    engine_instance=db_engine,
                    session_dependency_key="session",
                    session_config=AsyncSessionConfig(expire_on_commit=False),
                ),
            ),
        ],
        debug=settings.log_level == "DEBUG",
    )


# Application instance
app = create_app()
