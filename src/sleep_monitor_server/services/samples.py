"""Sample ingestion and query service."""

from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sleep_monitor_server.models.audio_movement import AudioMovementReading
from sleep_monitor_server.models.vital import VitalReading
from sleep_monitor_server.transformers import (
    AudioMovementTransformer,
    PayloadError,
    VitalTransformer,
)

logger = structlog.get_logger()


class TimeRange(str, Enum):
    """How far back a query reaches."""

    LAST_HOUR = "1h"
    LAST_12_HOURS = "12h"
    LAST_24_HOURS = "24h"
    LAST_7_DAYS = "7d"

    @property
    def delta(self) -> timedelta:
        """Length of the range."""
        return {
            TimeRange.LAST_HOUR: timedelta(hours=1),
            TimeRange.LAST_12_HOURS: timedelta(hours=12),
            TimeRange.LAST_24_HOURS: timedelta(hours=24),
            TimeRange.LAST_7_DAYS: timedelta(days=7),
        }[self]


class SampleService:
    """Store device batches and read them back newest first.

    Every batch is written in a single transaction: either all items of a
    POST are stored or none are.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize sample service.

        Args:
            session: Database session
        """
        self.session = session
        self.logger = logger.bind(service="samples")

    async def ingest_audio_movement(self, items: Any) -> list[AudioMovementReading]:
        """Store a batch of audio/movement items.

        Args:
            items: Decoded JSON body, must be a list of device items

        Returns:
            Stored readings in batch order

        Raises:
            PayloadError: If the body is not an array or an item is unusable
        """
        rows = [AudioMovementTransformer.transform(item) for item in self._require_batch(items)]
        return await self._store(AudioMovementReading, rows)

    async def ingest_vitals(self, items: Any) -> list[VitalReading]:
        """Store a batch of vital-signs items.

        Args:
            items: Decoded JSON body, must be a list of device items

        Returns:
            Stored readings in batch order

        Raises:
            PayloadError: If the body is not an array or an item is unusable
        """
        rows = [VitalTransformer.transform(item) for item in self._require_batch(items)]
        return await self._store(VitalReading, rows)

    async def list_audio_movement(
        self, time_range: TimeRange | None = None
    ) -> Sequence[AudioMovementReading]:
        """Audio/movement readings, newest first."""
        stmt = select(AudioMovementReading).order_by(
            AudioMovementReading.created_at.desc(), AudioMovementReading.id.desc()
        )
        if time_range is not None:
            stmt = stmt.where(AudioMovementReading.created_at >= self._since(time_range))

        result = await self.session.execute(stmt)
        return result.scalars().all()

    async def list_vitals(self, time_range: TimeRange | None = None) -> Sequence[VitalReading]:
        """Vital-signs readings, newest first."""
        stmt = select(VitalReading).order_by(
            VitalReading.created_at.desc(), VitalReading.id.desc()
        )
        if time_range is not None:
            stmt = stmt.where(VitalReading.created_at >= self._since(time_range))

        result = await self.session.execute(stmt)
        return result.scalars().all()

    @staticmethod
    def _require_batch(items: Any) -> list[Any]:
        if not isinstance(items, list):
            raise PayloadError("Body must be an array")
        return items

    @staticmethod
    def _since(time_range: TimeRange) -> datetime:
        return datetime.now(UTC) - time_range.delta

    async def _store(self, model: type[Any], rows: list[dict[str, Any]]) -> list[Any]:
        """Insert all rows in one transaction.

        Raises:
            Exception: Re-raises after rollback if the insert fails
        """
        records = [model(**row) for row in rows]

        try:
            self.session.add_all(records)
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            self.logger.error(
                "Batch insert failed", table=model.__tablename__, size=len(rows), error=str(e)
            )
            raise

        self.logger.info("Batch stored", table=model.__tablename__, size=len(records))
        return records
