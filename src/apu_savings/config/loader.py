"""YAML input files — load a saved fleet scenario into FleetInputs."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from apu_savings.config.inputs import FleetInputs

logger = logging.getLogger(__name__)


def default_inputs() -> FleetInputs:
    """Return the default fleet inputs."""
    return FleetInputs()


def inputs_schema() -> dict:
    """Return the JSON Schema for FleetInputs."""
    return FleetInputs.model_json_schema()


def load_inputs(path: str | Path) -> FleetInputs:
    """Load fleet inputs from a YAML mapping.

    Missing keys take the model defaults.  A top-level ``fleet:`` key is
    also accepted so that one file can carry other sections later.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValueError
        If the document is not a mapping.
    pydantic.ValidationError
        If a value is not numeric.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Scenario file must contain a mapping, got {type(data).__name__}: {path}")
    if isinstance(data.get("fleet"), dict):
        data = data["fleet"]

    inputs = FleetInputs(**data)
    logger.info("Loaded fleet inputs from %s (%s trucks)", path, inputs.fleet_size)
    return inputs
