"""Status labels, secondary indicators and recommendations."""

import math
from collections.abc import Sequence

from sleep_monitor_server.analytics.rounding import round_half_up
from sleep_monitor_server.analytics.thresholds import DEFAULT_THRESHOLDS, AnalyticsThresholds
from sleep_monitor_server.schemas.analytics import (
    Metrics,
    MetricStatus,
    Recommendation,
    Severity,
    SleepSummary,
    StageDistribution,
)
from sleep_monitor_server.schemas.samples import AudioMovementSample

DEEP_SLEEP_STATE = 2
REM_STATE = 3


def metric_status(
    metrics: Metrics, thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS
) -> MetricStatus:
    """Qualitative labels for the headline numbers.

    An unreadable (NaN) vital average is labelled Unknown.
    """
    if not math.isfinite(metrics.avg_heart_rate):
        heart_rate = "Unknown"
    elif metrics.avg_heart_rate < thresholds.heart_rate_min:
        heart_rate = "Low"
    elif metrics.avg_heart_rate > thresholds.heart_rate_max:
        heart_rate = "High"
    else:
        heart_rate = "Normal"

    if not math.isfinite(metrics.avg_spo2):
        spo2 = "Unknown"
    elif metrics.avg_spo2 > thresholds.spo2_healthy:
        spo2 = "Excellent"
    elif metrics.avg_spo2 > thresholds.spo2_fair:
        spo2 = "Good"
    else:
        spo2 = "Low"

    return MetricStatus(
        heart_rate=heart_rate,
        spo2=spo2,
        sleep_duration=(
            "Optimal"
            if metrics.sleep_duration_hours >= thresholds.target_sleep_hours
            else "Insufficient"
        ),
        snoring="high" if metrics.snore_event_count > thresholds.snore_events_max else "normal",
        movement=(
            "restless"
            if metrics.movement_event_count > thresholds.movement_events_max
            else "peaceful"
        ),
    )


def recommendations(
    metrics: Metrics, thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS
) -> list[Recommendation]:
    """Recommendations triggered by the headline metrics."""
    results: list[Recommendation] = []

    if metrics.snore_event_count > thresholds.snore_events_max:
        results.append(
            Recommendation(
                code="adjust_sleep_position",
                message="Consider sleep position adjustment for snoring",
                severity=Severity.CRITICAL,
            )
        )

    if metrics.sleep_duration_hours < thresholds.target_sleep_hours:
        results.append(
            Recommendation(
                code="extend_sleep",
                message=f"Aim for at least {thresholds.target_sleep_hours:g} hours of sleep",
                severity=Severity.WARNING,
            )
        )

    if metrics.avg_spo2 < thresholds.spo2_alert:
        results.append(
            Recommendation(
                code="low_spo2",
                message="Low SpO2 detected - consult a healthcare provider",
                severity=Severity.CRITICAL,
            )
        )

    return results


def sleep_efficiency(samples: Sequence[AudioMovementSample]) -> float | None:
    """Percentage of audio samples not reported as awake."""
    if not samples:
        return None
    asleep = sum(1 for sample in samples if sample.state != 0)
    return round_half_up(asleep / len(samples) * 100)


def per_sleep_hour(count: int, duration_hours: float) -> float:
    """Events per tracked hour; with no tracked sleep the raw count is used."""
    return round_half_up(count / (duration_hours or 1))


def summarize(
    metrics: Metrics,
    audio_samples: Sequence[AudioMovementSample],
    distribution: StageDistribution,
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
) -> SleepSummary:
    """Build the secondary indicators shown next to the headline metrics.

    Args:
        metrics: Headline metrics for this pass
        audio_samples: Full audio/movement collection
        distribution: Stage distribution of the same collection
        thresholds: Label and recommendation thresholds

    Returns:
        SleepSummary
    """
    hours_per_sample = thresholds.sample_interval_minutes / 60

    return SleepSummary(
        status=metric_status(metrics, thresholds),
        sleep_efficiency_percent=sleep_efficiency(audio_samples),
        snore_index=per_sleep_hour(metrics.snore_event_count, metrics.sleep_duration_hours),
        movement_index=per_sleep_hour(
            metrics.movement_event_count, metrics.sleep_duration_hours
        ),
        deep_sleep_hours=round_half_up(
            distribution.count_for(DEEP_SLEEP_STATE) * hours_per_sample
        ),
        rem_sleep_hours=round_half_up(distribution.count_for(REM_STATE) * hours_per_sample),
        recommendations=recommendations(metrics, thresholds),
    )
