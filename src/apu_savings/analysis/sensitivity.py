"""Sensitivity / tornado analysis over the fleet inputs.

One-at-a-time sweeps: vary a single input, recompute, measure the change
in a chosen result metric.  Produces tornado chart data sorted by impact.

Default sweep set:
  - fuel_price ± 20%
  - idle_time ± 25%
  - apu_installation_cost ± 15%
  - apu_maintenance_cost ± 20%
  - operating_days_per_year ± 10%
  - apu_useful_life ± 20%
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from apu_savings.config.assumptions import (
    APU_DUTY_FRACTION,
    APU_FUEL_BURN_RATE,
    MAIN_ENGINE_IDLE_FUEL_BURN_RATE,
)
from apu_savings.config.inputs import FleetInputs
from apu_savings.engine.savings import compute_savings
from apu_savings.models.results import SavingsResults

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    field_name: str
    """FleetInputs field name (e.g. 'fuel_price')."""

    base_value: float
    low_value: float
    high_value: float

    metric_at_low: float
    """Metric when the field = low_value."""

    metric_at_high: float
    """Metric when the field = high_value."""

    delta: float
    """abs(metric_at_high − metric_at_low) — total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    metric: str
    """SavingsResults field the bars measure."""

    base_metric: float
    """Metric value for the unmodified inputs."""

    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta (descending)."""


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Fuel price", "fuel_price", -0.20, 0.20),
    ("Idle time", "idle_time", -0.25, 0.25),
    ("APU installation cost", "apu_installation_cost", -0.15, 0.15),
    ("APU maintenance cost", "apu_maintenance_cost", -0.20, 0.20),
    ("Operating days", "operating_days_per_year", -0.10, 0.10),
    ("APU useful life", "apu_useful_life", -0.20, 0.20),
]

SWEEPABLE_METRICS = (
    "net_annual_savings",
    "total_net_benefit",
    "payback_years",
    "annual_fuel_savings_total",
    "annualized_apu_cost_per_year",
)


def _check_field(name: str) -> None:
    if name not in FleetInputs.model_fields:
        raise ValueError(f"Unknown fleet input: {name!r}")


def _check_metric(metric: str) -> None:
    if metric not in SWEEPABLE_METRICS:
        raise ValueError(f"Metric must be one of {SWEEPABLE_METRICS}, got {metric!r}")


def _metric_for(inputs: FleetInputs, name: str, value: float, metric: str) -> float:
    """Recompute with one field replaced and return the chosen metric."""
    results: SavingsResults = compute_savings(inputs.model_copy(update={name: value}))
    return float(getattr(results, metric))


def run_sensitivity(
    inputs: FleetInputs,
    sweeps: list[tuple[str, str, float, float]] | None = None,
    metric: str = "total_net_benefit",
) -> SensitivityResult:
    """Run one-at-a-time sensitivity analysis.

    Parameters
    ----------
    inputs : FleetInputs
        Base inputs.
    sweeps : list[tuple[name, field, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS.
    metric : str
        SavingsResults field to measure; one of ``SWEEPABLE_METRICS``.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by swing width.
    """
    _check_metric(metric)
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base_metric = float(getattr(compute_savings(inputs), metric))

    bars: list[TornadoBar] = []
    for name, field_name, low_pct, high_pct in sweeps:
        _check_field(field_name)
        base_val = float(getattr(inputs, field_name))
        low_val = base_val * (1 + low_pct)
        high_val = base_val * (1 + high_pct)

        at_low = _metric_for(inputs, field_name, low_val, metric)
        at_high = _metric_for(inputs, field_name, high_val, metric)
        logger.debug("Sweep %s: %s=%.4g → %.2f, %s=%.4g → %.2f",
                     metric, field_name, low_val, at_low, field_name, high_val, at_high)

        bars.append(TornadoBar(
            param_name=name,
            field_name=field_name,
            base_value=round(base_val, 4),
            low_value=round(low_val, 4),
            high_value=round(high_val, 4),
            metric_at_low=round(at_low, 2),
            metric_at_high=round(at_high, 2),
            delta=round(abs(at_high - at_low), 2),
        ))

    bars.sort(key=lambda b: b.delta, reverse=True)

    return SensitivityResult(metric=metric, base_metric=round(base_metric, 2), bars=bars)


def sweep_metric(
    inputs: FleetInputs,
    field_name: str,
    low: float,
    high: float,
    points: int = 25,
    metric: str = "net_annual_savings",
) -> list[tuple[float, float]]:
    """Evaluate ``metric`` over an evenly spaced grid of one input.

    Returns ``(input_value, metric_value)`` pairs, ``low`` and ``high``
    included.
    """
    _check_field(field_name)
    _check_metric(metric)
    if points < 2:
        raise ValueError(f"points must be at least 2, got {points}")

    grid = np.linspace(low, high, points)
    return [(float(x), _metric_for(inputs, field_name, float(x), metric)) for x in grid]


def break_even_fuel_price(inputs: FleetInputs) -> float | None:
    """Fuel price at which net annual savings are exactly zero.

    Net savings are linear in fuel price:
      net = fuel_price × k − maintenance × fleet
      k   = idle × days × fleet × (main_burn − duty × apu_burn)

    Returns None when k is zero (fuel price has no effect on savings).
    """
    gallons_saved_per_truck = inputs.idle_time * inputs.operating_days_per_year * (
        MAIN_ENGINE_IDLE_FUEL_BURN_RATE - APU_DUTY_FRACTION * APU_FUEL_BURN_RATE
    )
    k = gallons_saved_per_truck * inputs.fleet_size
    if k == 0:
        return None
    return inputs.apu_maintenance_cost * inputs.fleet_size / k
