"""Pydantic schemas for samples and derived analytics."""

from sleep_monitor_server.schemas.analytics import (
    AudioMovementPoint,
    EventTag,
    Metrics,
    MetricStatus,
    QualityCategory,
    QualityScore,
    Recommendation,
    Severity,
    SleepAnalytics,
    SleepSummary,
    StageCount,
    StageDistribution,
    TimelineEvent,
    TimelineEventType,
    VitalPoint,
    VitalRanges,
)
from sleep_monitor_server.schemas.samples import (
    AudioMovementRecord,
    AudioMovementSample,
    VitalRecord,
    VitalSample,
)

__all__ = [
    "AudioMovementPoint",
    "AudioMovementRecord",
    "AudioMovementSample",
    "EventTag",
    "Metrics",
    "MetricStatus",
    "QualityCategory",
    "QualityScore",
    "Recommendation",
    "Severity",
    "SleepAnalytics",
    "SleepSummary",
    "StageCount",
    "StageDistribution",
    "TimelineEvent",
    "TimelineEventType",
    "VitalPoint",
    "VitalRanges",
    "VitalRecord",
    "VitalSample",
]
