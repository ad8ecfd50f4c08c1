"""Stream-wide averages and event counts."""

import math
from collections.abc import Sequence

from sleep_monitor_server.analytics.events import count_events
from sleep_monitor_server.analytics.rounding import round_half_up
from sleep_monitor_server.analytics.scoring import score_quality
from sleep_monitor_server.analytics.sleep_interval import track_sleep
from sleep_monitor_server.analytics.thresholds import DEFAULT_THRESHOLDS, AnalyticsThresholds
from sleep_monitor_server.schemas.analytics import Metrics, QualityScore
from sleep_monitor_server.schemas.samples import AudioMovementSample, VitalSample


def mean_of(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for no values.

    A NaN among the values (an unparseable reading upstream) makes the
    result NaN rather than raising.
    """
    if not values:
        return 0.0
    return math.fsum(values) / len(values)


def vital_means(vitals: Sequence[VitalSample]) -> tuple[float, float, float]:
    """Unrounded mean heart rate, SpO2 and temperature.

    Returns:
        ``(heart_rate, spo2, temperature)``
    """
    return (
        mean_of([v.heart_rate for v in vitals]),
        mean_of([v.spo2 for v in vitals]),
        mean_of([v.temperature for v in vitals]),
    )


def compute_metrics(
    audio_samples: Sequence[AudioMovementSample],
    vital_samples: Sequence[VitalSample],
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
) -> tuple[Metrics, QualityScore | None]:
    """Compute the headline metrics from both streams.

    Either stream being empty is not an error: the result is
    ``Metrics.empty()`` (all zeros, Fair) and no score breakdown.
    The score is taken on the exact means; only the reported averages are
    rounded to one decimal.

    Args:
        audio_samples: Audio/movement samples, oldest first
        vital_samples: Vital samples (order irrelevant)
        thresholds: Detection and scoring thresholds

    Returns:
        ``(metrics, quality)``
    """
    if not audio_samples or not vital_samples:
        return Metrics.empty(), None

    heart_rate, spo2, temperature = vital_means(vital_samples)
    snore_count, movement_count = count_events(audio_samples, thresholds)
    tracking = track_sleep(audio_samples)

    quality = score_quality(
        avg_spo2=spo2,
        avg_heart_rate=heart_rate,
        snore_count=snore_count,
        movement_count=movement_count,
        thresholds=thresholds,
    )

    metrics = Metrics(
        avg_heart_rate=round_half_up(heart_rate),
        avg_spo2=round_half_up(spo2),
        avg_temperature=round_half_up(temperature),
        sleep_duration_hours=tracking.duration_hours,
        snore_event_count=snore_count,
        movement_event_count=movement_count,
        quality_score=quality.total,
        quality_category=quality.category,
    )
    return metrics, quality
