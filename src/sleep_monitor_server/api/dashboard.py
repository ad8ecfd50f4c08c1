"""Dashboard analytics endpoint."""

from typing import Annotated, Any

from litestar import Router, get
from litestar.params import Parameter
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.ext.asyncio import AsyncSession

from sleep_monitor_server.services.dashboard import DashboardService
from sleep_monitor_server.services.samples import TimeRange


@get("/dashboard", status_code=HTTP_200_OK)
async def get_dashboard(
    session: AsyncSession,
    time_range: Annotated[
        TimeRange | None,
        Parameter(query="range", description="Only analyse samples from 1h, 12h, 24h or 7d"),
    ] = None,
) -> dict[str, Any]:
    """Get sleep analytics over the stored samples.

    Recomputed in full on every request. Clients poll it every
    ``refresh_interval_seconds``.

    Example response structure:
    ```json
    {
      "generated_at": "2026-01-13T06:00:00Z",
      "audio_sample_count": 480,
      "vital_sample_count": 480,
      "refresh_interval_seconds": 30,
      "analytics": {
        "metrics": {
          "avg_heart_rate": 61.4,
          "avg_spo2": 96.8,
          "avg_temperature": 36.5,
          "sleep_duration_hours": 7.2,
          "snore_event_count": 4,
          "movement_event_count": 12,
          "quality_score": 100,
          "quality_category": "Excellent"
        },
        "stage_distribution": {
          "stages": [{"state": 0, "label": "Awake", "count": 40, "percent": 8.3}]
        }
      }
    }
    ```
    """
    service = DashboardService(session)
    dashboard = await service.get_dashboard(time_range)

    # Convert to dict for JSON serialization
    return dashboard.model_dump(mode="json")


dashboard_router = Router(
    path="/",
    route_handlers=[get_dashboard],
    tags=["Dashboard"],
)
