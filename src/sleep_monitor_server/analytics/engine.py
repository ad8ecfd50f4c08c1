"""One full analytics pass over a snapshot of both sensor streams."""

from collections.abc import Sequence

from sleep_monitor_server.analytics.aggregates import compute_metrics
from sleep_monitor_server.analytics.presentation import (
    audio_movement_series,
    recent_events,
    stage_distribution,
    vital_ranges,
    vital_series,
)
from sleep_monitor_server.analytics.summary import summarize
from sleep_monitor_server.analytics.thresholds import DEFAULT_THRESHOLDS, AnalyticsThresholds
from sleep_monitor_server.schemas.analytics import SleepAnalytics
from sleep_monitor_server.schemas.samples import AudioMovementSample, VitalSample


def analyze(
    audio_samples: Sequence[AudioMovementSample],
    vital_samples: Sequence[VitalSample],
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
    newest_first: bool = True,
    display_timezone: str = "UTC",
) -> SleepAnalytics:
    """Derive metrics, chart series and the stage distribution.

    Stateless and idempotent: the same snapshot always yields the same
    result, and nothing carries over between calls. Degenerate input
    (empty streams, NaN readings, a night with no awake sample) still
    produces a complete result.

    Args:
        audio_samples: Audio/movement samples
        vital_samples: Vital samples
        thresholds: Detection, scoring and display thresholds
        newest_first: Whether the inputs arrive newest first, as the
            storage query returns them. They are reversed once so every
            order-dependent step sees oldest first.
        display_timezone: IANA timezone for chart and timeline labels

    Returns:
        SleepAnalytics for this snapshot
    """
    if newest_first:
        audio = list(reversed(audio_samples))
        vitals = list(reversed(vital_samples))
    else:
        audio = list(audio_samples)
        vitals = list(vital_samples)

    metrics, quality = compute_metrics(audio, vitals, thresholds)

    vital_points = vital_series(vitals, thresholds, display_timezone)
    distribution = stage_distribution(audio)

    return SleepAnalytics(
        metrics=metrics,
        quality=quality,
        audio_series=audio_movement_series(audio, thresholds, display_timezone),
        vital_series=vital_points,
        stage_distribution=distribution,
        vital_ranges=vital_ranges(vital_points),
        summary=summarize(metrics, audio, distribution, thresholds),
        recent_events=recent_events(audio, thresholds, display_timezone),
    )
