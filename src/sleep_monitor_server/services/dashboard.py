"""Dashboard analytics service."""

from datetime import UTC, datetime

import structlog
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from sleep_monitor_server.analytics import AnalyticsThresholds, analyze
from sleep_monitor_server.core.config import settings
from sleep_monitor_server.schemas.analytics import SleepAnalytics
from sleep_monitor_server.schemas.samples import AudioMovementSample, VitalSample
from sleep_monitor_server.services.samples import SampleService, TimeRange

logger = structlog.get_logger()


class DashboardResponse(BaseModel):
    """Analytics snapshot plus the metadata a polling client needs."""

    generated_at: datetime = Field(description="When this snapshot was computed")
    time_range: TimeRange | None = Field(default=None, description="Range the samples cover")
    audio_sample_count: int = Field(description="Audio/movement samples analysed")
    vital_sample_count: int = Field(description="Vital samples analysed")
    refresh_interval_seconds: int = Field(description="Suggested polling interval")
    analytics: SleepAnalytics


class DashboardService:
    """Recompute the dashboard analytics from the stored samples.

    Each call is a full pass over the current snapshot; nothing is cached
    between calls.
    """

    def __init__(
        self,
        session: AsyncSession,
        thresholds: AnalyticsThresholds | None = None,
        display_timezone: str | None = None,
    ) -> None:
        """Initialize dashboard service.

        Args:
            session: Database session
            thresholds: Analytics thresholds, defaults to the configured ones
            display_timezone: Label timezone, defaults to the configured one
        """
        self.samples = SampleService(session)
        self.thresholds = thresholds or settings.analytics
        self.display_timezone = display_timezone or settings.display_timezone
        self.logger = logger.bind(service="dashboard")

    async def get_dashboard(self, time_range: TimeRange | None = None) -> DashboardResponse:
        """Load both streams and run one analytics pass.

        Args:
            time_range: Restrict to samples stored within this range

        Returns:
            DashboardResponse
        """
        audio_rows = await self.samples.list_audio_movement(time_range)
        vital_rows = await self.samples.list_vitals(time_range)

        audio = [AudioMovementSample.model_validate(row) for row in audio_rows]
        vitals = [VitalSample.model_validate(row) for row in vital_rows]

        analytics = analyze(
            audio,
            vitals,
            thresholds=self.thresholds,
            newest_first=True,
            display_timezone=self.display_timezone,
        )

        self.logger.info(
            "Dashboard analytics computed",
            time_range=time_range.value if time_range else None,
            audio_samples=len(audio),
            vital_samples=len(vitals),
            quality=analytics.metrics.quality_category.value,
        )

        return DashboardResponse(
            generated_at=datetime.now(UTC),
            time_range=time_range,
            audio_sample_count=len(audio),
            vital_sample_count=len(vitals),
            refresh_interval_seconds=settings.dashboard_refresh_seconds,
            analytics=analytics,
        )
