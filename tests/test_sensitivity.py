"""Tests for analysis/sensitivity.py — tornado bars, sweeps, break-even."""

from __future__ import annotations

import pytest

from apu_savings.analysis import (
    DEFAULT_SWEEPS,
    SWEEPABLE_METRICS,
    break_even_fuel_price,
    run_sensitivity,
    sweep_metric,
)
from apu_savings.config import FleetInputs
from apu_savings.engine import compute_savings


class TestRunSensitivity:

    def test_one_bar_per_sweep(self, default_inputs: FleetInputs):
        result = run_sensitivity(default_inputs)
        assert len(result.bars) == len(DEFAULT_SWEEPS)
        assert result.metric == "total_net_benefit"

    def test_base_metric(self, default_inputs: FleetInputs):
        result = run_sensitivity(default_inputs)
        # 97,520 × 5 − 200,000 = 287,600
        assert result.base_metric == pytest.approx(287_600)

    def test_sorted_by_swing(self, default_inputs: FleetInputs):
        result = run_sensitivity(default_inputs)
        deltas = [b.delta for b in result.bars]
        assert deltas == sorted(deltas, reverse=True)

    def test_expected_order(self, default_inputs: FleetInputs):
        # per-truck fuel saved per $/gal: 8 × 300 × (0.8 − 0.16) = 1,536
        #   idle ±25%      → ±1,344 × 100  = 268,800 swing
        #   fuel ±20%      → ±1,075.2 × 100 = 215,040
        #   life 4 vs 6    → 97,520 × 2     = 195,040
        #   days ±10%      → ±537.6 × 100  = 107,520
        #   install ±15%   → ±30,000        = 60,000
        #   maint ±20%     → ±100 × 20 × 5  = 20,000
        result = run_sensitivity(default_inputs)
        assert [b.field_name for b in result.bars] == [
            "idle_time",
            "fuel_price",
            "apu_useful_life",
            "operating_days_per_year",
            "apu_installation_cost",
            "apu_maintenance_cost",
        ]
        assert result.bars[0].delta == pytest.approx(268_800)
        assert result.bars[-1].delta == pytest.approx(20_000)

    def test_cost_inputs_hurt_when_high(self, default_inputs: FleetInputs):
        bars = {b.field_name: b for b in run_sensitivity(default_inputs).bars}
        install = bars["apu_installation_cost"]
        assert install.low_value == pytest.approx(8_500)
        assert install.high_value == pytest.approx(11_500)
        assert install.metric_at_low > install.metric_at_high

    def test_custom_sweep_and_metric(self, default_inputs: FleetInputs):
        result = run_sensitivity(
            default_inputs,
            sweeps=[("Fleet", "fleet_size", -0.5, 0.5)],
            metric="net_annual_savings",
        )
        bar = result.bars[0]
        # net is linear in fleet size: 10 trucks → 48,760, 30 trucks → 146,280
        assert bar.metric_at_low == pytest.approx(48_760)
        assert bar.metric_at_high == pytest.approx(146_280)

    def test_unknown_field(self, default_inputs: FleetInputs):
        with pytest.raises(ValueError, match="Unknown fleet input"):
            run_sensitivity(default_inputs, sweeps=[("Bad", "tyre_pressure", -0.1, 0.1)])

    def test_unknown_metric(self, default_inputs: FleetInputs):
        with pytest.raises(ValueError, match="Metric must be one of"):
            run_sensitivity(default_inputs, metric="cumulative_savings")

    def test_inputs_not_mutated(self, default_inputs: FleetInputs):
        before = default_inputs.model_dump()
        run_sensitivity(default_inputs)
        assert default_inputs.model_dump() == before


class TestSweepMetric:

    def test_endpoints_and_length(self, default_inputs: FleetInputs):
        curve = sweep_metric(default_inputs, "fuel_price", 2.0, 5.0)
        assert len(curve) == 25
        assert curve[0][0] == pytest.approx(2.0)
        assert curve[-1][0] == pytest.approx(5.0)

    def test_linear_in_fuel_price(self, default_inputs: FleetInputs):
        # slope = 8 × 300 × 0.64 × 20 = 30,720 $ of net savings per $/gal
        curve = sweep_metric(default_inputs, "fuel_price", 3.0, 4.0, points=2)
        assert curve[1][1] - curve[0][1] == pytest.approx(30_720)

    @pytest.mark.parametrize("metric", SWEEPABLE_METRICS)
    def test_every_metric_sweepable(self, default_inputs: FleetInputs, metric: str):
        curve = sweep_metric(default_inputs, "idle_time", 4, 12, points=3, metric=metric)
        assert len(curve) == 3

    def test_too_few_points(self, default_inputs: FleetInputs):
        with pytest.raises(ValueError, match="points"):
            sweep_metric(default_inputs, "fuel_price", 2.0, 5.0, points=1)


class TestBreakEvenFuelPrice:

    def test_default_fleet(self, default_inputs: FleetInputs):
        # 500 × 20 / 30,720 ≈ 0.3255 $/gal
        assert break_even_fuel_price(default_inputs) == pytest.approx(10_000 / 30_720)

    def test_net_zero_at_break_even(self, default_inputs: FleetInputs):
        price = break_even_fuel_price(default_inputs)
        r = compute_savings(default_inputs.model_copy(update={"fuel_price": price}))
        assert r.net_annual_savings == pytest.approx(0, abs=1e-6)

    def test_none_without_idling(self, default_inputs: FleetInputs):
        assert break_even_fuel_price(default_inputs.model_copy(update={"idle_time": 0})) is None
