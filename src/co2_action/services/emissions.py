"""Emissions estimation over a pluggable per-byte model."""

from dataclasses import dataclass
from typing import Protocol


class EmissionsModel(Protocol):
    """Interface for a per-byte carbon model."""

    def per_byte(self, bytes_count: int, green: bool) -> float:
        """Return grams of CO2 for transferring ``bytes_count`` bytes."""


@dataclass
class EmissionsEstimator:
    """Service that converts byte counts into grams of CO2."""

    model: EmissionsModel

    def estimate(self, bytes_count: int, green: bool) -> float:
        """Estimate grams of CO2 for a byte count."""
        if bytes_count < 0:
            raise ValueError(f"bytes_count must be non-negative, got {bytes_count}")
        return float(self.model.per_byte(bytes_count, green))
