"""Shared test fixtures — fleet inputs matching scenarios/base_case.yaml."""

from __future__ import annotations

from pathlib import Path

import pytest

from apu_savings.config import FleetInputs
from apu_savings.engine import compute_savings
from apu_savings.models import SavingsResults

SCENARIOS_DIR = Path(__file__).resolve().parent.parent / "scenarios"


@pytest.fixture
def default_inputs() -> FleetInputs:
    return FleetInputs(
        fleet_size=20,
        idle_time=8,
        fuel_price=3.50,
        apu_installation_cost=10_000,
        apu_maintenance_cost=500,
        apu_useful_life=5,
        operating_days_per_year=300,
    )


@pytest.fixture
def default_results(default_inputs: FleetInputs) -> SavingsResults:
    return compute_savings(default_inputs)


@pytest.fixture
def zero_fleet_inputs(default_inputs: FleetInputs) -> FleetInputs:
    return default_inputs.model_copy(update={"fleet_size": 0})


@pytest.fixture
def unviable_inputs(default_inputs: FleetInputs) -> FleetInputs:
    """Maintenance ($6,000/truck) above the fuel saved ($5,376/truck)."""
    return default_inputs.model_copy(update={"apu_maintenance_cost": 6_000})


@pytest.fixture
def one_year_inputs(default_inputs: FleetInputs) -> FleetInputs:
    return default_inputs.model_copy(update={"apu_useful_life": 1})


@pytest.fixture
def base_case_path() -> Path:
    return SCENARIOS_DIR / "base_case.yaml"
