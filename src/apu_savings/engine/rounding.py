"""Round-to-nearest with halves going up (towards +∞).

Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``).
Payback months and the whole-dollar figures in the summary use the
half-up convention instead: ``2.5 → 3``, ``-2.5 → -2``.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int | float:
    """Round ``value`` to the nearest integer, halves towards +∞.

    Non-finite values (nan, ±inf) are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    # value - floor(value) is exact; value + 0.5 is not
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole
