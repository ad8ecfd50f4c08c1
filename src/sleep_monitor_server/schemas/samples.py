"""Pydantic schemas for raw sensor samples."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class AudioMovementSample(BaseModel):
    """One audio/movement reading as seen by the analytics engine."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    mic_rms: float = Field(description="Microphone RMS level")
    piezo_peak: float = Field(description="Peak piezo amplitude")
    state: int = Field(description="0 Awake, 1 Light Sleep, 2 Deep Sleep, 3 REM")
    timestamp: int = Field(description="Device clock, epoch milliseconds")
    recorded_at: datetime = Field(
        validation_alias=AliasChoices("recorded_at", "created_at"),
        description="When the server stored the reading",
    )


class VitalSample(BaseModel):
    """One vital-signs reading as seen by the analytics engine."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    heart_rate: float = Field(description="Heart rate (BPM)")
    spo2: float = Field(description="Blood oxygen saturation (%)")
    temperature: float = Field(description="Body temperature (Celsius)")
    timestamp: int = Field(description="Device clock, epoch milliseconds")
    recorded_at: datetime = Field(
        validation_alias=AliasChoices("recorded_at", "created_at"),
        description="When the server stored the reading",
    )


class AudioMovementRecord(BaseModel):
    """Stored audio/movement reading returned by the query endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    mic_rms: float
    piezo_peak: float
    state: int
    timestamp: int
    created_at: datetime


class VitalRecord(BaseModel):
    """Stored vital-signs reading returned by the query endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    heart_rate: float
    spo2: float
    temperature: float
    timestamp: int
    created_at: datetime
