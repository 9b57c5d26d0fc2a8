"""Property tests for compute_savings and summarize over generated fleets."""

from __future__ import annotations

import math

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from apu_savings.config import FleetInputs
from apu_savings.engine import compute_savings
from apu_savings.narrative import summarize_results

fleet_inputs = st.builds(
    FleetInputs,
    fleet_size=st.integers(min_value=0, max_value=5_000),
    idle_time=st.floats(min_value=0, max_value=24),
    fuel_price=st.floats(min_value=0, max_value=20),
    apu_installation_cost=st.floats(min_value=0, max_value=50_000),
    apu_maintenance_cost=st.floats(min_value=0, max_value=20_000),
    apu_useful_life=st.integers(min_value=0, max_value=40),
    operating_days_per_year=st.integers(min_value=0, max_value=366),
)


@settings(max_examples=50)
@given(inputs=fleet_inputs)
def test_totals_are_per_truck_times_fleet(inputs: FleetInputs):
    r = compute_savings(inputs)
    assert r.pre_apu_cost_total == r.pre_apu_cost_per_truck * inputs.fleet_size
    assert r.post_apu_cost_total == r.post_apu_cost_per_truck * inputs.fleet_size
    assert r.annual_fuel_savings_total == r.pre_apu_cost_total - r.post_apu_cost_total


@settings(max_examples=50)
@given(inputs=fleet_inputs)
def test_no_payback_without_positive_net(inputs: FleetInputs):
    r = compute_savings(inputs)
    if r.net_annual_savings <= 0:
        assert r.payback_years == 0
        assert r.payback_months == 0
        assert summarize_results(inputs, r).endswith("is not financially viable at this time.")
    else:
        assert r.payback_years == pytest.approx(r.total_initial_capital_cost / r.net_annual_savings)


@settings(max_examples=50)
@given(inputs=fleet_inputs)
def test_cumulative_series_shape(inputs: FleetInputs):
    r = compute_savings(inputs)
    series = r.cumulative_savings
    assert len(series) == math.floor(inputs.apu_useful_life)
    assert [p.year for p in series] == [f"Year {i}" for i in range(1, len(series) + 1)]
    if series:
        assert series[-1].savings == pytest.approx(
            r.net_annual_savings * inputs.apu_useful_life, rel=1e-9, abs=1e-6
        )
        values = [p.savings for p in series]
        pairs = list(zip(values, values[1:]))
        if r.net_annual_savings > 0:
            assert all(a < b for a, b in pairs)
        elif r.net_annual_savings < 0:
            assert all(a > b for a, b in pairs)
        else:
            assert all(v == values[0] for v in values)


@settings(max_examples=25)
@given(inputs=fleet_inputs)
def test_idempotent(inputs: FleetInputs):
    assert compute_savings(inputs) == compute_savings(inputs)
