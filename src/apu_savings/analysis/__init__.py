"""Analysis — sensitivity sweeps and break-even figures."""

from apu_savings.analysis.sensitivity import (
    DEFAULT_SWEEPS,
    SWEEPABLE_METRICS,
    SensitivityResult,
    TornadoBar,
    break_even_fuel_price,
    run_sensitivity,
    sweep_metric,
)

__all__ = [
    "DEFAULT_SWEEPS",
    "SWEEPABLE_METRICS",
    "SensitivityResult",
    "TornadoBar",
    "break_even_fuel_price",
    "run_sensitivity",
    "sweep_metric",
]
