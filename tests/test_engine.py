"""Tests for the full analytics pass."""

import math

from sleep_monitor_server.analytics import analyze
from sleep_monitor_server.schemas.analytics import Metrics, QualityCategory
from tests.fixtures.samples import (
    MINUTE_MS,
    NIGHT_START_MS,
    audio_sample,
    state_sequence,
    vital_sample,
)


def night() -> tuple[list, list]:
    """Chronological audio and vital samples for a short night."""
    plan = [
        (0, 15, 2, 0),
        (10, 18, 3, 1),
        (40, 140, 4, 1),
        (70, 30, 80, 1),
        (130, 25, 5, 2),
        (160, 22, 75, 2),
        (190, 120, 6, 3),
        (220, 19, 3, 0),
    ]
    audio = [
        audio_sample(
            mic_rms=mic, piezo_peak=pz, state=state, timestamp=NIGHT_START_MS + m * MINUTE_MS
        )
        for m, mic, pz, state in plan
    ]
    vitals = [
        vital_sample(heart_rate=58 + i, timestamp=NIGHT_START_MS + i * 30 * MINUTE_MS)
        for i in range(8)
    ]
    return audio, vitals


class TestAnalyze:
    """Tests for analyze."""

    def test_night(self) -> None:
        """Test the headline metrics of a short healthy night."""
        audio, vitals = night()

        result = analyze(audio, vitals, newest_first=False)

        assert result.metrics.avg_heart_rate == 61.5
        assert result.metrics.avg_spo2 == 97.0
        assert result.metrics.sleep_duration_hours == 3.5
        assert result.metrics.snore_event_count == 2
        assert result.metrics.movement_event_count == 1
        assert result.metrics.quality_score == 100
        assert result.metrics.quality_category == QualityCategory.EXCELLENT
        assert result.stage_distribution.as_mapping() == {
            "Awake": 2,
            "Light Sleep": 3,
            "Deep Sleep": 2,
            "REM": 1,
        }
        assert len(result.audio_series) == 8
        assert sum(p.is_moving for p in result.audio_series) == 2
        assert result.vital_ranges.heart_rate_variability == 7
        assert result.recent_events[0].event_type.value == "Awake"

    def test_newest_first_is_reversed_once(self) -> None:
        """Test storage order input matches chronological input."""
        audio, vitals = night()

        chronological = analyze(audio, vitals, newest_first=False)
        from_storage = analyze(audio[::-1], vitals[::-1], newest_first=True)

        assert from_storage == chronological
        assert from_storage.audio_series[0].time == "22:00"

    def test_wrong_order_loses_duration(self) -> None:
        """Test the tracker depends on chronological order."""
        audio, vitals = night()

        result = analyze(audio, vitals, newest_first=True)

        assert result.metrics.sleep_duration_hours == 0.0

    def test_idempotent(self) -> None:
        """Test the same snapshot gives the same result."""
        audio, vitals = night()
        assert analyze(audio, vitals) == analyze(audio, vitals)

    def test_empty_streams(self) -> None:
        """Test empty input still yields a complete result."""
        result = analyze([], [])

        assert result.metrics == Metrics.empty()
        assert result.quality is None
        assert result.audio_series == []
        assert result.vital_series == []
        assert result.stage_distribution.stages == []
        assert result.recent_events == []
        assert result.summary.sleep_efficiency_percent is None

    def test_empty_vitals_keeps_charts(self) -> None:
        """Test the audio charts are still shaped when vitals are missing."""
        result = analyze(state_sequence([0, 1, 0]), [], newest_first=False)

        assert result.metrics == Metrics.empty()
        assert len(result.audio_series) == 3
        assert result.stage_distribution.as_mapping() == {"Awake": 2, "Light Sleep": 1}

    def test_nan_reading(self) -> None:
        """Test a NaN vital produces a NaN average instead of failing."""
        audio, _ = night()

        result = analyze(audio, [vital_sample(temperature=math.nan)], newest_first=False)

        assert math.isnan(result.metrics.avg_temperature)
        assert result.metrics.quality_category == QualityCategory.EXCELLENT

    def test_display_timezone(self) -> None:
        """Test labels follow the requested timezone."""
        audio, vitals = night()

        result = analyze(audio, vitals, newest_first=False, display_timezone="Asia/Tokyo")

        assert result.audio_series[0].time == "07:00"
