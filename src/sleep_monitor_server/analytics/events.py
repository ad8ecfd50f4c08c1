"""Per-sample snore and movement classification."""

from collections.abc import Iterable

from sleep_monitor_server.analytics.thresholds import DEFAULT_THRESHOLDS, AnalyticsThresholds
from sleep_monitor_server.schemas.analytics import EventTag
from sleep_monitor_server.schemas.samples import AudioMovementSample


def is_snoring(
    sample: AudioMovementSample, thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS
) -> bool:
    """Check whether the microphone level counts as a snore."""
    return sample.mic_rms > thresholds.snore_mic_rms


def has_motion(
    sample: AudioMovementSample, thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS
) -> bool:
    """Check whether the piezo peak shows bed motion, whatever the sleep state."""
    return sample.piezo_peak > thresholds.movement_piezo_peak


def is_movement_event(
    sample: AudioMovementSample, thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS
) -> bool:
    """Check whether the sample is a movement event.

    Motion only counts while the device reports light sleep. Motion while
    awake, in deep sleep or in REM is not an event.
    """
    return has_motion(sample, thresholds) and sample.state == thresholds.movement_state


def detect_events(
    sample: AudioMovementSample, thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS
) -> frozenset[EventTag]:
    """Classify one audio/movement sample.

    Args:
        sample: Audio/movement reading
        thresholds: Detection thresholds

    Returns:
        Zero, one or both of ``EventTag.SNORE`` and ``EventTag.MOVEMENT``
    """
    tags = set()
    if is_snoring(sample, thresholds):
        tags.add(EventTag.SNORE)
    if is_movement_event(sample, thresholds):
        tags.add(EventTag.MOVEMENT)
    return frozenset(tags)


def count_events(
    samples: Iterable[AudioMovementSample],
    thresholds: AnalyticsThresholds = DEFAULT_THRESHOLDS,
) -> tuple[int, int]:
    """Count snore and movement events over a whole collection.

    Returns:
        ``(snore_count, movement_count)``
    """
    snore_count = 0
    movement_count = 0
    for sample in samples:
        tags = detect_events(sample, thresholds)
        if EventTag.SNORE in tags:
            snore_count += 1
        if EventTag.MOVEMENT in tags:
            movement_count += 1
    return snore_count, movement_count
