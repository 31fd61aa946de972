"""
Domain errors for waiting-time distributions.

All of them are ValueErrors, so callers that already guard construction
with ``except ValueError`` keep working.
"""

from __future__ import annotations


class DistributionError(ValueError):
    """Base class for invalid distribution inputs."""


class EmptyDistributionError(DistributionError):
    """Waiting-time input has no days."""


class InvalidWeightsError(DistributionError):
    """Weights are negative, non-finite or not a 1-D sequence."""


class ZeroMassDistributionError(DistributionError):
    """Weights sum to zero, so they cannot be normalised."""


class ExhaustedMassError(DistributionError):
    """Survival mass hits zero before the last day (trailing zero-probability days)."""

    def __init__(self, day: int, max_day: int):
        self.day = day
        self.max_day = max_day
        super().__init__(
            f"No probability mass left at day {day} (max_day={max_day}). "
            f"Drop the trailing zero-probability days."
        )


class InvalidParametersError(DistributionError):
    """Parametric family received missing or out-of-range parameters."""
