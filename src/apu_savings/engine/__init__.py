"""Engine — the APU savings calculation."""

from apu_savings.engine.savings import build_cumulative_savings, compute_savings
from apu_savings.engine.rounding import round_half_up

__all__ = [
    "compute_savings",
    "build_cumulative_savings",
    "round_half_up",
]
