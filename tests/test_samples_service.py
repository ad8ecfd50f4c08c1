"""Tests for sample ingestion and queries."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sleep_monitor_server.services.samples import SampleService, TimeRange
from sleep_monitor_server.transformers import PayloadError
from tests.fixtures.samples import night_payloads


class TestIngest:
    """Tests for batch ingestion."""

    async def test_store_audio_batch(self, async_session: AsyncSession) -> None:
        """Test every item of a batch is stored in order."""
        audio, _ = night_payloads()
        service = SampleService(async_session)

        stored = await service.ingest_audio_movement(audio)

        assert len(stored) == 8
        assert all(row.id is not None for row in stored)
        assert [row.state for row in stored] == [0, 1, 1, 1, 2, 2, 3, 0]
        assert stored[2].mic_rms == 140.0

    async def test_store_vital_batch(self, async_session: AsyncSession) -> None:
        """Test vitals are stored with parsed values."""
        _, vitals = night_payloads()

        stored = await SampleService(async_session).ingest_vitals(vitals)

        assert [row.heart_rate for row in stored] == [58.0 + i for i in range(8)]
        assert stored[0].spo2 == 97.0

    async def test_empty_batch(self, async_session: AsyncSession) -> None:
        """Test an empty array stores nothing and is not an error."""
        assert await SampleService(async_session).ingest_vitals([]) == []

    @pytest.mark.parametrize("body", [{"mic": "1"}, "1,2,3", None, 42])
    async def test_non_array_rejected(self, async_session: AsyncSession, body: object) -> None:
        """Test the body must be a JSON array."""
        with pytest.raises(PayloadError, match="Body must be an array"):
            await SampleService(async_session).ingest_audio_movement(body)

    async def test_bad_item_rejects_whole_batch(self, async_session: AsyncSession) -> None:
        """Test one unusable item means nothing from the batch is stored."""
        audio, _ = night_payloads()
        audio[3]["state"] = "deep"
        service = SampleService(async_session)

        with pytest.raises(PayloadError):
            await service.ingest_audio_movement(audio)

        assert await service.list_audio_movement() == []

    async def test_database_failure_rolls_back(self, async_session: AsyncSession) -> None:
        """Test a failed commit is rolled back and re-raised."""
        _, vitals = night_payloads()
        service = SampleService(async_session)

        with patch.object(
            async_session, "commit", AsyncMock(side_effect=SQLAlchemyError("disk full"))
        ):
            with pytest.raises(SQLAlchemyError):
                await service.ingest_vitals(vitals)

        assert await service.list_vitals() == []


class TestList:
    """Tests for the newest-first queries."""

    async def test_newest_first(self, async_session: AsyncSession, seeded_night) -> None:
        """Test queries return the last stored item first."""
        service = SampleService(async_session)

        audio = await service.list_audio_movement()
        vitals = await service.list_vitals()

        assert seeded_night == {"audio": 8, "vitals": 8}
        assert [row.state for row in audio] == [0, 3, 2, 2, 1, 1, 1, 0]
        assert [row.heart_rate for row in vitals] == [65.0 - i for i in range(8)]

    async def test_later_batch_comes_first(self, async_session: AsyncSession) -> None:
        """Test a second POST sorts ahead of the first."""
        service = SampleService(async_session)
        first = {"heartRate": "60", "spo2": "97", "temperature": "36", "timestamp": "1"}
        second = {"heartRate": "70", "spo2": "97", "temperature": "36", "timestamp": "2"}
        await service.ingest_vitals([first])
        await service.ingest_vitals([second])

        rows = await service.list_vitals()

        assert [row.heart_rate for row in rows] == [70.0, 60.0]

    async def test_time_range(self, async_session: AsyncSession, seeded_night) -> None:
        """Test a range drops samples stored before it."""
        service = SampleService(async_session)
        rows = await service.list_audio_movement()
        rows[-1].created_at = datetime.now(UTC) - timedelta(days=2)
        await async_session.commit()

        last_day = await service.list_audio_movement(TimeRange.LAST_24_HOURS)
        last_week = await service.list_audio_movement(TimeRange.LAST_7_DAYS)

        assert len(last_day) == 7
        assert len(last_week) == 8

    def test_time_range_values(self) -> None:
        """Test the accepted range values and their lengths."""
        assert TimeRange("1h").delta == timedelta(hours=1)
        assert TimeRange("12h").delta == timedelta(hours=12)
        assert TimeRange("24h").delta == timedelta(days=1)
        assert TimeRange("7d").delta == timedelta(days=7)
