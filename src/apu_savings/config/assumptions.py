"""Model assumptions — fixed fuel-burn figures, not user-editable.

Commonly accepted industry averages for Class 8 trucks.
"""

MAIN_ENGINE_IDLE_FUEL_BURN_RATE = 0.8
"""Main engine fuel burn while idling (gallons/hour)."""

APU_FUEL_BURN_RATE = 0.2
"""APU fuel burn while running (gallons/hour)."""

APU_DUTY_FRACTION = 0.8
"""Fraction of idle time the APU runs in place of the main engine."""
