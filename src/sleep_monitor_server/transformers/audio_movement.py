"""Audio/movement payload transformer.

Converts one device payload item to a database-ready dictionary.
"""

from typing import Any

from sleep_monitor_server.transformers.parsing import PayloadError, parse_float, parse_int


class AudioMovementTransformer:
    """Transform device item -> Database AudioMovementReading dict.

    Device Fields -> Database Fields:
    - mic -> mic_rms
    - pz -> piezo_peak
    - state -> state
    - t -> timestamp (epoch ms)
    """

    @staticmethod
    def transform(item: Any) -> dict[str, Any]:
        """Convert a device payload item to a database-ready dict.

        Raises:
            PayloadError: If the item is not an object or state/t are unusable
        """
        if not isinstance(item, dict):
            raise PayloadError("Each item must be an object")

        return {
            "mic_rms": parse_float(item.get("mic")),
            "piezo_peak": parse_float(item.get("pz")),
            "state": parse_int(item.get("state"), "state"),
            "timestamp": parse_int(item.get("t"), "t"),
        }
