"""Vital-signs payload transformer.

Converts one device payload item to a database-ready dictionary.
"""

from typing import Any

from sleep_monitor_server.transformers.parsing import PayloadError, parse_float, parse_int


class VitalTransformer:
    """Transform device item -> Database VitalReading dict.

    Device Fields -> Database Fields:
    - heartRate -> heart_rate
    - spo2 -> spo2
    - temperature -> temperature
    - timestamp -> timestamp (epoch ms)
    """

    @staticmethod
    def transform(item: Any) -> dict[str, Any]:
        """Convert a device payload item to a database-ready dict.

        Raises:
            PayloadError: If the item is not an object or timestamp is unusable
        """
        if not isinstance(item, dict):
            raise PayloadError("Each item must be an object")

        return {
            "heart_rate": parse_float(item.get("heartRate")),
            "spo2": parse_float(item.get("spo2")),
            "temperature": parse_float(item.get("temperature")),
            "timestamp": parse_int(item.get("timestamp"), "timestamp"),
        }
