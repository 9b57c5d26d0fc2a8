"""Calculator state — one immutable (inputs, results) revision.

The dashboard keeps exactly one of these in ``st.session_state`` and
replaces it whole whenever an input changes.  Results are never patched
and never computed from a partially updated set of inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from apu_savings.config.inputs import FleetInputs
from apu_savings.engine.savings import compute_savings
from apu_savings.models.results import SavingsResults

SESSION_KEY = "calculator_state"


@dataclass(frozen=True)
class CalculatorState:
    """Inputs plus the results derived from exactly those inputs."""

    inputs: FleetInputs
    results: SavingsResults
    revision: int = 0
    """Bumped on every change; 0 for the initial defaults."""

    @classmethod
    def from_inputs(cls, inputs: FleetInputs, revision: int = 0) -> CalculatorState:
        return cls(inputs=inputs, results=compute_savings(inputs), revision=revision)

    @classmethod
    def initial(cls) -> CalculatorState:
        return cls.from_inputs(FleetInputs())

    def with_inputs(self, inputs: FleetInputs) -> CalculatorState:
        """Next revision for a full replacement of the inputs.

        Unchanged inputs return ``self`` so reruns without edits keep the
        same revision.
        """
        if inputs == self.inputs:
            return self
        return CalculatorState.from_inputs(inputs, revision=self.revision + 1)

    def with_changes(self, **changes: Any) -> CalculatorState:
        """Next revision for a field-by-field edit."""
        return self.with_inputs(FleetInputs(**{**self.inputs.model_dump(), **changes}))

    def reset(self) -> CalculatorState:
        """Next revision back at the default inputs."""
        return self.with_inputs(FleetInputs())
