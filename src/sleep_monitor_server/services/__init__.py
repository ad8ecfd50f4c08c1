"""Application services."""

from sleep_monitor_server.services.dashboard import DashboardResponse, DashboardService
from sleep_monitor_server.services.samples import SampleService, TimeRange

__all__ = [
    "DashboardResponse",
    "DashboardService",
    "SampleService",
    "TimeRange",
]
