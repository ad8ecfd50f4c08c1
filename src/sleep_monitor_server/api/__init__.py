"""API routes."""

from litestar import Router

from sleep_monitor_server.api.dashboard import dashboard_router
from sleep_monitor_server.api.health import health_router
from sleep_monitor_server.api.samples import samples_router
from sleep_monitor_server.core.config import settings

# Device and dashboard endpoints share the configured prefix (/api)
api_router = Router(
    path=settings.api_prefix,
    route_handlers=[samples_router, dashboard_router],
)

# Export: health (root), api (prefixed)
api_routers = [health_router, api_router]

__all__ = ["api_routers"]
