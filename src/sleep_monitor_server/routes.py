"""Root application routes."""

from litestar import get
from litestar.response import Redirect
from litestar.status_codes import HTTP_303_SEE_OTHER

from sleep_monitor_server.core.config import settings


@get("/", sync_to_thread=False, include_in_schema=False)
async def root_redirect() -> Redirect:
    """Redirect root to the dashboard analytics."""
    return Redirect(path=f"{settings.api_prefix}/dashboard", status_code=HTTP_303_SEE_OTHER)
