"""Weighted sleep quality score."""

from sleep_monitor_server.analytics.thresholds import DEFAULT_THRESHOLDS, AnalyticsThresholds
from sleep_monitor_server.schemas.analytics import QualityCategory, QualityScore


def categorize(
    total: int, thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS
) -> QualityCategory:
    """Map a summed score to its category. Lower bounds are inclusive."""
    if total >= thresholds.excellent_score:
        return QualityCategory.EXCELLENT
    if total >= thresholds.good_score:
        return QualityCategory.GOOD
    if total >= thresholds.fair_score:
        return QualityCategory.FAIR
    return QualityCategory.POOR


def score_quality(
    avg_spo2: float,
    avg_heart_rate: float,
    snore_count: int,
    movement_count: int,
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
) -> QualityScore:
    """Score a night out of 100 from four equally weighted conditions.

    Each satisfied condition is worth ``full_points``. A missed vital
    condition still earns ``vital_fallback_points`` and a missed event
    limit ``event_fallback_points``, so the floor is 50 with stock values.
    A NaN average never satisfies its condition.

    Args:
        avg_spo2: Mean SpO2 (%)
        avg_heart_rate: Mean heart rate (BPM)
        snore_count: Snore events in the collection
        movement_count: Movement events in the collection
        thresholds: Scoring thresholds

    Returns:
        QualityScore with the per-term points, the total and the category
    """
    full = thresholds.full_points

    spo2_points = full if avg_spo2 > thresholds.spo2_healthy else thresholds.vital_fallback_points
    heart_rate_points = (
        full
        if thresholds.heart_rate_min <= avg_heart_rate <= thresholds.heart_rate_max
        else thresholds.vital_fallback_points
    )
    snore_points = (
        full if snore_count < thresholds.snore_events_max else thresholds.event_fallback_points
    )
    movement_points = (
        full
        if movement_count < thresholds.movement_events_max
        else thresholds.event_fallback_points
    )

    total = spo2_points + heart_rate_points + snore_points + movement_points

    return QualityScore(
        spo2_points=spo2_points,
        heart_rate_points=heart_rate_points,
        snore_points=snore_points,
        movement_points=movement_points,
        total=total,
        category=categorize(total, thresholds),
    )
