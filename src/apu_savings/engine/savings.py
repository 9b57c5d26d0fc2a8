"""APU savings calculation — fleet inputs → SavingsResults.

Pure arithmetic, no state, no validation.  Degenerate inputs (zero,
negative, nan, inf) propagate through IEEE float arithmetic; a zero
useful life gives an infinite or nan annualized cost rather than an error.

Key formulas:
  pre-APU cost / truck  = idle_hrs × 0.8 gal/hr × $/gal × days
  post-APU cost / truck = (idle_hrs × 0.8) × 0.2 gal/hr × $/gal × days
  net annual savings    = fleet fuel savings − fleet maintenance
  payback (years)       = capital cost / net annual savings   (0 if net ≤ 0)
"""

from __future__ import annotations

import logging
import math

from apu_savings.config.assumptions import (
    APU_DUTY_FRACTION,
    APU_FUEL_BURN_RATE,
    MAIN_ENGINE_IDLE_FUEL_BURN_RATE,
)
from apu_savings.config.inputs import FleetInputs
from apu_savings.engine.rounding import round_half_up
from apu_savings.models.results import CumulativeSavingsPoint, SavingsResults

logger = logging.getLogger(__name__)


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: x/0 → ±inf, 0/0 → nan (Python raises instead)."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def build_cumulative_savings(
    net_annual_savings: float,
    apu_useful_life: float,
) -> tuple[CumulativeSavingsPoint, ...]:
    """Running total of net annual savings, one point per year of APU life.

    Years run 1, 2, … while ``year <= apu_useful_life``, so a fractional
    life is truncated and a life below 1 (or nan) gives an empty series.
    """
    if apu_useful_life == math.inf:
        raise ValueError("apu_useful_life must be finite to build the cumulative savings series")
    if math.isnan(apu_useful_life) or apu_useful_life < 1:
        return ()

    points: list[CumulativeSavingsPoint] = []
    running_total = 0.0
    for year in range(1, math.floor(apu_useful_life) + 1):
        running_total += net_annual_savings
        points.append(CumulativeSavingsPoint(year=f"Year {year}", savings=running_total))
    return tuple(points)


def compute_savings(inputs: FleetInputs) -> SavingsResults:
    """Compute annual costs, savings, payback and lifetime benefit for a fleet."""

    # ── Per-truck idling fuel cost ─────────────────────────────────────
    apu_active_hours = inputs.idle_time * APU_DUTY_FRACTION
    pre_apu_cost_per_truck = (
        inputs.idle_time * MAIN_ENGINE_IDLE_FUEL_BURN_RATE * inputs.fuel_price * inputs.operating_days_per_year
    )
    post_apu_cost_per_truck = (
        apu_active_hours * APU_FUEL_BURN_RATE * inputs.fuel_price * inputs.operating_days_per_year
    )

    # ── Fleet totals ───────────────────────────────────────────────────
    pre_apu_cost_total = pre_apu_cost_per_truck * inputs.fleet_size
    post_apu_cost_total = post_apu_cost_per_truck * inputs.fleet_size
    annual_fuel_savings_total = pre_apu_cost_total - post_apu_cost_total
    annual_maintenance_cost_total = inputs.apu_maintenance_cost * inputs.fleet_size
    total_initial_capital_cost = inputs.apu_installation_cost * inputs.fleet_size
    net_annual_savings = annual_fuel_savings_total - annual_maintenance_cost_total

    # ── Payback ────────────────────────────────────────────────────────
    # net > 0 here, so the division is safe.
    payback_years = total_initial_capital_cost / net_annual_savings if net_annual_savings > 0 else 0
    payback_months = round_half_up(payback_years * 12)

    # ── Lifetime ───────────────────────────────────────────────────────
    total_apu_life_savings = (
        (pre_apu_cost_per_truck - post_apu_cost_per_truck) * inputs.apu_useful_life * inputs.fleet_size
    )
    total_net_benefit = (
        total_apu_life_savings
        - total_initial_capital_cost
        - annual_maintenance_cost_total * inputs.apu_useful_life
    )

    cumulative_savings = build_cumulative_savings(net_annual_savings, inputs.apu_useful_life)

    annualized_apu_cost_per_year = (
        _divide(total_initial_capital_cost, inputs.apu_useful_life) + annual_maintenance_cost_total
    )

    logger.debug(
        "APU savings: fleet=%s net_annual=%.2f payback_months=%s net_benefit=%.2f",
        inputs.fleet_size, net_annual_savings, payback_months, total_net_benefit,
    )

    return SavingsResults(
        pre_apu_cost_per_truck=pre_apu_cost_per_truck,
        pre_apu_cost_total=pre_apu_cost_total,
        post_apu_cost_per_truck=post_apu_cost_per_truck,
        post_apu_cost_total=post_apu_cost_total,
        annual_fuel_savings_total=annual_fuel_savings_total,
        annual_maintenance_cost_total=annual_maintenance_cost_total,
        net_annual_savings=net_annual_savings,
        payback_years=payback_years,
        payback_months=payback_months,
        total_initial_capital_cost=total_initial_capital_cost,
        total_net_benefit=total_net_benefit,
        annualized_apu_cost_per_year=annualized_apu_cost_per_year,
        cumulative_savings=cumulative_savings,
    )
