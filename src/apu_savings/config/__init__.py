"""Configuration — fleet inputs, fixed assumptions, YAML loading."""

from apu_savings.config.inputs import FleetInputs
from apu_savings.config.assumptions import (
    APU_DUTY_FRACTION,
    APU_FUEL_BURN_RATE,
    MAIN_ENGINE_IDLE_FUEL_BURN_RATE,
)
from apu_savings.config.loader import default_inputs, inputs_schema, load_inputs

__all__ = [
    "FleetInputs",
    "MAIN_ENGINE_IDLE_FUEL_BURN_RATE",
    "APU_FUEL_BURN_RATE",
    "APU_DUTY_FRACTION",
    "default_inputs",
    "inputs_schema",
    "load_inputs",
]
