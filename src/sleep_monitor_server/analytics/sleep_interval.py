"""Sleep duration from the device's sleep-state sequence.

A two-state run detector. Light sleep (state 1) opens an interval, awake
(state 0) closes it and adds its length to the total. Deep sleep and REM
neither open, close nor extend an interval, so light -> deep -> awake
still closes correctly.

An interval that is still open after the last sample contributes nothing:
a night that never reports awake again is undercounted, not estimated.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from sleep_monitor_server.analytics.rounding import round_half_up
from sleep_monitor_server.schemas.samples import AudioMovementSample

AWAKE_STATE = 0
LIGHT_SLEEP_STATE = 1
MS_PER_HOUR = 3_600_000


@dataclass(frozen=True)
class NoOpenInterval:
    """Tracker state: subject considered awake, nothing being measured."""


@dataclass(frozen=True)
class OpenInterval:
    """Tracker state: an interval started at ``start`` (epoch ms) and is running."""

    start: int


TrackerState = NoOpenInterval | OpenInterval


@dataclass(frozen=True)
class SleepTracking:
    """Result of folding the tracker over a chronological sample sequence."""

    total_ms: int = 0
    intervals: tuple[tuple[int, int], ...] = field(default_factory=tuple)
    final_state: TrackerState = field(default_factory=NoOpenInterval)

    @property
    def duration_hours(self) -> float:
        """Total closed-interval time in hours, one decimal."""
        return round_half_up(self.total_ms / MS_PER_HOUR)

    @property
    def has_open_interval(self) -> bool:
        """Whether the sequence ended inside an unclosed interval."""
        return isinstance(self.final_state, OpenInterval)


def advance(
    state: TrackerState, sample: AudioMovementSample
) -> tuple[TrackerState, tuple[int, int] | None]:
    """Apply one sample to the tracker.

    Args:
        state: Current tracker state
        sample: Next sample in chronological order

    Returns:
        ``(next_state, closed_interval)`` where ``closed_interval`` is the
        ``(start, end)`` pair closed by this sample, if any
    """
    if isinstance(state, NoOpenInterval) and sample.state == LIGHT_SLEEP_STATE:
        return OpenInterval(start=sample.timestamp), None
    if isinstance(state, OpenInterval) and sample.state == AWAKE_STATE:
        return NoOpenInterval(), (state.start, sample.timestamp)
    return state, None


def track_sleep(samples: Iterable[AudioMovementSample]) -> SleepTracking:
    """Accumulate sleep time over a chronologically ordered sequence.

    Args:
        samples: Audio/movement samples, oldest first

    Returns:
        SleepTracking with the total, the closed intervals and the final state
    """
    state: TrackerState = NoOpenInterval()
    intervals: list[tuple[int, int]] = []
    total_ms = 0

    for sample in samples:
        state, closed = advance(state, sample)
        if closed is not None:
            intervals.append(closed)
            # Device clock jumps backwards must not make the total negative
            total_ms += max(0, closed[1] - closed[0])

    return SleepTracking(total_ms=total_ms, intervals=tuple(intervals), final_state=state)
