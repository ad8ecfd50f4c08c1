"""Database models."""

from sleep_monitor_server.models.audio_movement import AudioMovementReading
from sleep_monitor_server.models.base import Base
from sleep_monitor_server.models.vital import VitalReading

__all__ = [
    "Base",
    "AudioMovementReading",
    "VitalReading",
]
