"""Tunable thresholds for event detection, scoring and display shaping."""

from pydantic import BaseModel, ConfigDict, Field


class AnalyticsThresholds(BaseModel):
    """Named threshold values used by the analytics engine.

    Defaults reproduce the device's stock scoring rule. Every comparison in
    the engine reads from here so the rule can be tuned and tested in
    isolation.
    """

    model_config = ConfigDict(frozen=True)

    # Event detection
    snore_mic_rms: float = Field(default=100, description="Mic RMS above this is a snore")
    movement_piezo_peak: float = Field(default=50, description="Piezo peak above this is motion")
    movement_state: int = Field(default=1, description="Sleep state in which motion counts")

    # Quality scoring
    spo2_healthy: float = Field(default=95, description="Average SpO2 above this scores full")
    heart_rate_min: float = Field(default=60, description="Lower bound of normal heart rate")
    heart_rate_max: float = Field(default=100, description="Upper bound of normal heart rate")
    snore_events_max: int = Field(default=10, description="Snore count below this scores full")
    movement_events_max: int = Field(
        default=20, description="Movement count below this scores full"
    )
    full_points: int = Field(default=25, description="Points for a satisfied condition")
    vital_fallback_points: int = Field(default=15, description="Points for a missed vital")
    event_fallback_points: int = Field(default=10, description="Points for a missed event limit")
    excellent_score: int = Field(default=90, description="Minimum score for Excellent")
    good_score: int = Field(default=75, description="Minimum score for Good")
    fair_score: int = Field(default=60, description="Minimum score for Fair")

    # Display shaping
    window_size: int = Field(default=50, ge=1, description="Chart points kept per stream")
    timeline_size: int = Field(default=10, ge=1, description="Entries in the recent events list")
    sample_interval_minutes: float = Field(
        default=5, gt=0, description="Nominal minutes between audio samples"
    )

    # Summary labels and recommendations
    spo2_fair: float = Field(default=90, description="Average SpO2 above this is Good")
    spo2_alert: float = Field(default=92, description="Average SpO2 below this is flagged")
    target_sleep_hours: float = Field(default=7, description="Recommended nightly sleep")


DEFAULT_THRESHOLDS = AnalyticsThresholds()
