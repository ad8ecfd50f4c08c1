"""Device payload -> Database model transformers."""

from sleep_monitor_server.transformers.audio_movement import AudioMovementTransformer
from sleep_monitor_server.transformers.parsing import PayloadError
from sleep_monitor_server.transformers.vital import VitalTransformer

__all__ = [
    "AudioMovementTransformer",
    "PayloadError",
    "VitalTransformer",
]
