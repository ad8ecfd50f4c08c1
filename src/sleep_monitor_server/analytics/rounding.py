"""Display rounding shared by the analytics modules."""

import math


def round_half_up(value: float, digits: int = 1) -> float:
    """Round to ``digits`` decimals with halves going up (2.25 -> 2.3).

    Builtin ``round`` rounds halves to even, which would disagree with the
    dashboard's historical values. NaN and infinities are returned as is.
    """
    if not math.isfinite(value):
        return value
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
