"""Device-facing sample endpoints.

The firmware posts JSON arrays of string-valued items:

    POST /api/sleepdata1  [{"mic": "12.5", "pz": "3.1", "state": "1", "t": "1700000000000"}]
    POST /api/sleepdata2  [{"heartRate": "62", "spo2": "97", "temperature": "36.4",
                            "timestamp": "1700000000000"}]
"""

from typing import Annotated, Any

import structlog
from litestar import Router, get, post
from litestar.exceptions import InternalServerException, ValidationException
from litestar.params import Parameter
from litestar.status_codes import HTTP_200_OK
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sleep_monitor_server.schemas.samples import AudioMovementRecord, VitalRecord
from sleep_monitor_server.services.samples import SampleService, TimeRange
from sleep_monitor_server.transformers import PayloadError

logger = structlog.get_logger()

RangeParam = Annotated[
    TimeRange | None,
    Parameter(query="range", description="Only samples stored within 1h, 12h, 24h or 7d"),
]


@get("/sleepdata1", status_code=HTTP_200_OK)
async def list_audio_movement(
    session: AsyncSession,
    time_range: RangeParam = None,
) -> list[dict[str, Any]]:
    """Get stored audio/movement samples, newest first."""
    try:
        rows = await SampleService(session).list_audio_movement(time_range)
    except SQLAlchemyError as e:
        logger.error("Failed to fetch audio/movement samples", error=str(e))
        raise InternalServerException(detail="Failed to fetch data") from e

    return [AudioMovementRecord.model_validate(row).model_dump(mode="json") for row in rows]


@post("/sleepdata1", status_code=HTTP_200_OK)
async def create_audio_movement(data: Any, session: AsyncSession) -> list[dict[str, Any]]:
    """Store a batch of audio/movement samples (all or nothing).

    Returns:
        The stored records
    """
    try:
        rows = await SampleService(session).ingest_audio_movement(data)
    except PayloadError as e:
        raise ValidationException(detail=str(e)) from e
    except SQLAlchemyError as e:
        raise InternalServerException(detail="Failed to save data") from e

    return [AudioMovementRecord.model_validate(row).model_dump(mode="json") for row in rows]


@get("/sleepdata2", status_code=HTTP_200_OK)
async def list_vitals(
    session: AsyncSession,
    time_range: RangeParam = None,
) -> list[dict[str, Any]]:
    """Get stored vital-signs samples, newest first."""
    try:
        rows = await SampleService(session).list_vitals(time_range)
    except SQLAlchemyError as e:
        logger.error("Failed to fetch vital samples", error=str(e))
        raise InternalServerException(detail="Failed to fetch data") from e

    return [VitalRecord.model_validate(row).model_dump(mode="json") for row in rows]


@post("/sleepdata2", status_code=HTTP_200_OK)
async def create_vitals(data: Any, session: AsyncSession) -> list[dict[str, Any]]:
    """Store a batch of vital-signs samples (all or nothing).

    Returns:
        The stored records
    """
    try:
        rows = await SampleService(session).ingest_vitals(data)
    except PayloadError as e:
        raise ValidationException(detail=str(e)) from e
    except SQLAlchemyError as e:
        raise InternalServerException(detail="Failed to save data") from e

    return [VitalRecord.model_validate(row).model_dump(mode="json") for row in rows]


samples_router = Router(
    path="/",
    route_handlers=[list_audio_movement, create_audio_movement, list_vitals, create_vitals],
    tags=["Samples"],
)
