"""Result models — calculation output contracts."""

from apu_savings.models.results import CumulativeSavingsPoint, SavingsResults

__all__ = [
    "CumulativeSavingsPoint",
    "SavingsResults",
]
