"""Result types — the contract between the savings engine and the dashboard.

Results are rebuilt in full for every change of inputs and never patched.
Values are left unrounded; rounding happens only at display time.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CumulativeSavingsPoint(BaseModel):
    """One year of the cumulative net savings series."""

    model_config = ConfigDict(frozen=True)

    year: str
    """Label, e.g. ``"Year 3"``."""

    savings: float
    """Running total of net annual savings up to and including this year."""


class SavingsResults(BaseModel):
    """Derived financials for one set of fleet inputs."""

    model_config = ConfigDict(frozen=True)

    # --- Annual idling fuel cost ---
    pre_apu_cost_per_truck: float
    """idle_time × main engine burn × fuel_price × operating days."""

    pre_apu_cost_total: float
    """pre_apu_cost_per_truck × fleet_size."""

    post_apu_cost_per_truck: float
    """APU active hours × APU burn × fuel_price × operating days."""

    post_apu_cost_total: float
    """post_apu_cost_per_truck × fleet_size."""

    # --- Annual savings ---
    annual_fuel_savings_total: float
    """pre_apu_cost_total − post_apu_cost_total."""

    annual_maintenance_cost_total: float
    """apu_maintenance_cost × fleet_size."""

    net_annual_savings: float
    """Fuel savings net of maintenance."""

    # --- Payback ---
    payback_years: float
    """Capital cost / net annual savings; 0 when net savings ≤ 0."""

    payback_months: int | float
    """payback_years × 12 rounded half-up.  A float only when the payback
    itself is not finite (non-finite inputs)."""

    # --- Investment ---
    total_initial_capital_cost: float
    """apu_installation_cost × fleet_size."""

    total_net_benefit: float
    """Lifetime fuel savings − capital cost − lifetime maintenance."""

    annualized_apu_cost_per_year: float
    """Capital cost spread over the useful life + annual maintenance.
    inf / nan for a zero useful life."""

    cumulative_savings: tuple[CumulativeSavingsPoint, ...]
    """Year-by-year running total of net annual savings (no discounting)."""
