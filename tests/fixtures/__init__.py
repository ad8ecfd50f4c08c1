"""Test fixtures for sleep-monitor-server."""

from tests.fixtures.samples import (
    audio_sample,
    night_payloads,
    seed_night,
    state_sequence,
    vital_sample,
)

__all__ = [
    "audio_sample",
    "night_payloads",
    "seed_night",
    "state_sequence",
    "vital_sample",
]
