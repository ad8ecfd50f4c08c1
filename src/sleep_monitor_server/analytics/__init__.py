"""Pure sleep analytics: event detection, sleep tracking, scoring and chart shaping."""

from sleep_monitor_server.analytics.aggregates import compute_metrics
from sleep_monitor_server.analytics.engine import analyze
from sleep_monitor_server.analytics.events import count_events, detect_events
from sleep_monitor_server.analytics.presentation import (
    audio_movement_series,
    stage_distribution,
    vital_series,
)
from sleep_monitor_server.analytics.scoring import categorize, score_quality
from sleep_monitor_server.analytics.sleep_interval import (
    NoOpenInterval,
    OpenInterval,
    SleepTracking,
    track_sleep,
)
from sleep_monitor_server.analytics.thresholds import DEFAULT_THRESHOLDS, AnalyticsThresholds

__all__ = [
    "DEFAULT_THRESHOLDS",
    "AnalyticsThresholds",
    "NoOpenInterval",
    "OpenInterval",
    "SleepTracking",
    "analyze",
    "audio_movement_series",
    "categorize",
    "compute_metrics",
    "count_events",
    "detect_events",
    "score_quality",
    "stage_distribution",
    "track_sleep",
    "vital_series",
]
