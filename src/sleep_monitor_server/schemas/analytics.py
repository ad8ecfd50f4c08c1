"""Pydantic schemas for derived sleep analytics."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QualityCategory(str, Enum):
    """Qualitative sleep quality bucket."""

    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


class EventTag(str, Enum):
    """Per-sample event classification."""

    SNORE = "Snore"
    MOVEMENT = "Movement"


class TimelineEventType(str, Enum):
    """Display classification for the recent events list."""

    SNORE = "Snore"
    MOVEMENT = "Movement"
    AWAKE = "Awake"
    SLEEP = "Sleep"


class Severity(str, Enum):
    """Severity of a recommendation."""

    WARNING = "warning"
    CRITICAL = "critical"


class QualityScore(BaseModel):
    """Weighted quality score and its four contributing terms."""

    model_config = ConfigDict(frozen=True)

    spo2_points: int = Field(description="Points from average SpO2")
    heart_rate_points: int = Field(description="Points from average heart rate")
    snore_points: int = Field(description="Points from snore event count")
    movement_points: int = Field(description="Points from movement event count")
    total: int = Field(ge=0, description="Sum of the four terms")
    category: QualityCategory = Field(description="Category derived from the total")


class Metrics(BaseModel):
    """Stream-wide summary metrics, recomputed on every pass."""

    model_config = ConfigDict(frozen=True)

    avg_heart_rate: float = Field(description="Mean heart rate (BPM), one decimal")
    avg_spo2: float = Field(description="Mean SpO2 (%), one decimal")
    avg_temperature: float = Field(description="Mean temperature (Celsius), one decimal")
    sleep_duration_hours: float = Field(ge=0, description="Tracked sleep, one decimal")
    snore_event_count: int = Field(ge=0, description="Samples classified as snores")
    movement_event_count: int = Field(ge=0, description="Samples classified as movements")
    quality_score: int = Field(ge=0, description="Weighted quality score")
    quality_category: QualityCategory = Field(description="Qualitative sleep quality")

    @classmethod
    def empty(cls) -> "Metrics":
        """Default metrics used when either stream has no samples."""
        return cls(
            avg_heart_rate=0.0,
            avg_spo2=0.0,
            avg_temperature=0.0,
            sleep_duration_hours=0.0,
            snore_event_count=0,
            movement_event_count=0,
            quality_score=0,
            quality_category=QualityCategory.FAIR,
        )


class AudioMovementPoint(BaseModel):
    """One chart point of the audio/movement series."""

    model_config = ConfigDict(frozen=True)

    time: str = Field(description="HH:MM label in the display timezone")
    mic_rms: float
    piezo_peak: float
    state: int
    is_snoring: bool
    is_moving: bool


class VitalPoint(BaseModel):
    """One chart point of the vital-signs series."""

    model_config = ConfigDict(frozen=True)

    time: str = Field(description="HH:MM label in the display timezone")
    heart_rate: float
    spo2: float
    temperature: float
    timestamp: int


class StageCount(BaseModel):
    """Sample count for one observed sleep stage."""

    model_config = ConfigDict(frozen=True)

    state: int = Field(description="Raw state value")
    label: str = Field(description="Human-readable stage name")
    count: int = Field(ge=1, description="Samples in this stage")
    percent: float = Field(description="Share of all audio samples (%), one decimal")


class StageDistribution(BaseModel):
    """Histogram of sleep stages over the full audio collection."""

    model_config = ConfigDict(frozen=True)

    stages: list[StageCount] = Field(default_factory=list, description="Ascending by state")

    def as_mapping(self) -> dict[str, int]:
        """Stage label -> sample count."""
        return {stage.label: stage.count for stage in self.stages}

    def count_for(self, state: int) -> int:
        """Sample count for a raw state value (0 when unobserved)."""
        return next((stage.count for stage in self.stages if stage.state == state), 0)


class VitalRanges(BaseModel):
    """Min/max of the windowed vital series."""

    model_config = ConfigDict(frozen=True)

    heart_rate_min: float | None = None
    heart_rate_max: float | None = None
    heart_rate_variability: float | None = Field(
        default=None, description="Max minus min heart rate in the window"
    )
    spo2_min: float | None = None
    spo2_max: float | None = None


class MetricStatus(BaseModel):
    """Qualitative labels for the headline metrics."""

    model_config = ConfigDict(frozen=True)

    heart_rate: str = Field(description="Low, Normal, High or Unknown")
    spo2: str = Field(description="Excellent, Good, Low or Unknown")
    sleep_duration: str = Field(description="Optimal or Insufficient")
    snoring: str = Field(description="high or normal")
    movement: str = Field(description="restless or peaceful")


class Recommendation(BaseModel):
    """Actionable recommendation derived from the metrics."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(description="Recommendation identifier")
    message: str = Field(description="Human-readable recommendation")
    severity: Severity


class SleepSummary(BaseModel):
    """Secondary indicators shown next to the headline metrics."""

    model_config = ConfigDict(frozen=True)

    status: MetricStatus
    sleep_efficiency_percent: float | None = Field(
        default=None, description="Share of audio samples not awake (%)"
    )
    snore_index: float = Field(description="Snore events per hour of tracked sleep")
    movement_index: float = Field(description="Movement events per hour of tracked sleep")
    deep_sleep_hours: float = Field(description="Deep sleep estimated from sample counts")
    rem_sleep_hours: float = Field(description="REM sleep estimated from sample counts")
    recommendations: list[Recommendation] = Field(default_factory=list)


class TimelineEvent(BaseModel):
    """Entry of the recent events list."""

    model_config = ConfigDict(frozen=True)

    time: str = Field(description="HH:MM:SS label in the display timezone")
    event_type: TimelineEventType
    detail: str | None = Field(default=None, description="Intensity, force or stage")


class SleepAnalytics(BaseModel):
    """Everything the dashboard derives from one snapshot of both streams."""

    model_config = ConfigDict(frozen=True)

    metrics: Metrics
    quality: QualityScore | None = Field(
        default=None, description="Score breakdown (absent when a stream is empty)"
    )
    audio_series: list[AudioMovementPoint] = Field(default_factory=list)
    vital_series: list[VitalPoint] = Field(default_factory=list)
    stage_distribution: StageDistribution = Field(default_factory=StageDistribution)
    vital_ranges: VitalRanges = Field(default_factory=VitalRanges)
    summary: SleepSummary
    recent_events: list[TimelineEvent] = Field(default_factory=list)
