"""Lenient numeric parsing for device payload fields.

The firmware sends every field as a string. Float fields that cannot be
read become NaN and flow on into the analytics, where they surface as NaN
averages. Integer fields (state, timestamp) are part of the ordering and
state-machine contract, so a bad value rejects the batch instead.
"""

import math
from typing import Any


class PayloadError(ValueError):
    """Device payload cannot be stored."""


def parse_float(value: Any) -> float:
    """Parse a numeric string or number, NaN when it isn't one."""
    if isinstance(value, bool) or value is None:
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def parse_int(value: Any, field: str) -> int:
    """Parse an integer field, accepting ``"3"``, ``3``, ``"3.0"`` and ``3.9`` (truncated).

    Raises:
        PayloadError: If the value is missing or not a finite number
    """
    if isinstance(value, bool) or value is None:
        raise PayloadError(f"Field '{field}' is required and must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        pass
    number = parse_float(value)
    if not math.isfinite(number):
        raise PayloadError(f"Field '{field}' must be an integer, got {value!r}")
    return int(number)
