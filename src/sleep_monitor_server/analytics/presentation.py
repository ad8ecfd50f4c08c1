"""Chart-ready views over the raw sample streams."""

from collections import Counter
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import TypeVar
from zoneinfo import ZoneInfo

from sleep_monitor_server.analytics.events import has_motion, is_snoring
from sleep_monitor_server.analytics.rounding import round_half_up
from sleep_monitor_server.analytics.thresholds import DEFAULT_THRESHOLDS, AnalyticsThresholds
from sleep_monitor_server.schemas.analytics import (
    AudioMovementPoint,
    StageCount,
    StageDistribution,
    TimelineEvent,
    TimelineEventType,
    VitalPoint,
    VitalRanges,
)
from sleep_monitor_server.schemas.samples import AudioMovementSample, VitalSample

T = TypeVar("T")

STAGE_LABELS = {
    0: "Awake",
    1: "Light Sleep",
    2: "Deep Sleep",
    3: "REM",
}


def stage_label(state: int) -> str:
    """Display name for a sleep state; unknown values are labelled, not rejected."""
    return STAGE_LABELS.get(state, f"State {state}")


def time_label(moment: datetime, timezone: str = "UTC", with_seconds: bool = False) -> str:
    """Format a storage timestamp as a wall-clock label.

    Naive datetimes (SQLite drops the offset) are taken as UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    local = moment.astimezone(ZoneInfo(timezone))
    return local.strftime("%H:%M:%S" if with_seconds else "%H:%M")


def window(samples: Sequence[T], size: int) -> list[T]:
    """Most recent ``size`` samples of a chronological sequence, still oldest first."""
    if size <= 0:
        return []
    return list(samples[-size:])


def audio_movement_series(
    samples: Sequence[AudioMovementSample],
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
    timezone: str = "UTC",
) -> list[AudioMovementPoint]:
    """Chart points for the latest window of the audio/movement stream.

    ``is_moving`` flags raw bed motion in any state, unlike the movement
    event count which only looks at light sleep.
    """
    return [
        AudioMovementPoint(
            time=time_label(sample.recorded_at, timezone),
            mic_rms=sample.mic_rms,
            piezo_peak=sample.piezo_peak,
            state=sample.state,
            is_snoring=is_snoring(sample, thresholds),
            is_moving=has_motion(sample, thresholds),
        )
        for sample in window(samples, thresholds.window_size)
    ]


def vital_series(
    samples: Sequence[VitalSample],
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
    timezone: str = "UTC",
) -> list[VitalPoint]:
    """Chart points for the latest window of the vitals stream."""
    return [
        VitalPoint(
            time=time_label(sample.recorded_at, timezone),
            heart_rate=sample.heart_rate,
            spo2=sample.spo2,
            temperature=sample.temperature,
            timestamp=sample.timestamp,
        )
        for sample in window(samples, thresholds.window_size)
    ]


def stage_distribution(samples: Sequence[AudioMovementSample]) -> StageDistribution:
    """Count samples per sleep stage over the full collection.

    Only stages that actually occur are listed, ascending by state value.
    """
    counts = Counter(sample.state for sample in samples)
    total = len(samples)

    return StageDistribution(
        stages=[
            StageCount(
                state=state,
                label=stage_label(state),
                count=count,
                percent=round_half_up(count / total * 100),
            )
            for state, count in sorted(counts.items())
        ]
    )


def vital_ranges(points: Sequence[VitalPoint]) -> VitalRanges:
    """Min/max heart rate and SpO2 over the windowed vital series."""
    if not points:
        return VitalRanges()

    heart_rates = [p.heart_rate for p in points]
    spo2_values = [p.spo2 for p in points]
    heart_rate_min = min(heart_rates)
    heart_rate_max = max(heart_rates)

    return VitalRanges(
        heart_rate_min=heart_rate_min,
        heart_rate_max=heart_rate_max,
        heart_rate_variability=heart_rate_max - heart_rate_min,
        spo2_min=min(spo2_values),
        spo2_max=max(spo2_values),
    )


def classify_timeline_event(
    sample: AudioMovementSample, thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS
) -> tuple[TimelineEventType, str | None]:
    """Pick the single most notable label for a sample.

    Snoring wins over motion, motion over being awake.
    """
    if is_snoring(sample, thresholds):
        return TimelineEventType.SNORE, f"Intensity: {sample.mic_rms:g}"
    if has_motion(sample, thresholds):
        return TimelineEventType.MOVEMENT, f"Force: {sample.piezo_peak:g}"
    if sample.state == 0:
        return TimelineEventType.AWAKE, None
    return TimelineEventType.SLEEP, f"Stage: {sample.state}"


def recent_events(
    samples: Sequence[AudioMovementSample],
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
    timezone: str = "UTC",
) -> list[TimelineEvent]:
    """Latest ``timeline_size`` samples, newest first, with display labels."""
    events = []
    for sample in reversed(window(samples, thresholds.timeline_size)):
        event_type, detail = classify_timeline_event(sample, thresholds)
        events.append(
            TimelineEvent(
                time=time_label(sample.recorded_at, timezone, with_seconds=True),
                event_type=event_type,
                detail=detail,
            )
        )
    return events
