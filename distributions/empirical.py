"""
Build waiting-time distributions from observed durations.

Input:  Integer durations in days (one per observed subject), e.g. days from
        infection to symptom onset
Output: NonparametricDistribution whose pmf is the normalised histogram

Durations past max_day (when given) are pooled on the last day, matching the
"everything left happens at the boundary" rule used for hazards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from core.config import HazardConfig
from core.errors import EmptyDistributionError, InvalidWeightsError
from core.utils import WeightsLike

from .nonparametric import NonparametricDistribution


@dataclass(frozen=True)
class EmpiricalSummary:
    """Summary statistics of observed durations."""
    n_observations: int
    mean: float
    std: float
    min_val: int
    median: float
    max_val: int

    def __repr__(self) -> str:
        return (
            f"EmpiricalSummary(mean={self.mean:.3f}, std={self.std:.3f}, "
            f"range=[{self.min_val}, {self.max_val}], n={self.n_observations})"
        )


def _as_durations(durations: WeightsLike) -> np.ndarray:
    if isinstance(durations, pd.Series):
        durations = durations.dropna().to_numpy()
    arr = np.asarray(durations, dtype=float).ravel()
    if arr.size == 0:
        raise EmptyDistributionError("No durations observed.")
    if not np.all(np.isfinite(arr)):
        raise InvalidWeightsError("Durations must be finite.")
    if np.any(arr < 0):
        raise InvalidWeightsError("Durations must be non-negative.")
    if np.any(arr != np.floor(arr)):
        raise InvalidWeightsError("Durations must be whole days.")
    return arr.astype(np.int64)


def summarize_durations(durations: WeightsLike) -> EmpiricalSummary:
    arr = _as_durations(durations)
    return EmpiricalSummary(
        n_observations=int(arr.size),
        mean=float(arr.mean()),
        std=float(arr.std(ddof=1)) if arr.size > 1 else 0.0,
        min_val=int(arr.min()),
        median=float(np.median(arr)),
        max_val=int(arr.max()),
    )


def estimate_from_durations(
    durations: WeightsLike,
    *,
    max_day: Optional[int] = None,
    config: Optional[HazardConfig] = None,
) -> NonparametricDistribution:
    """
    Histogram observed durations into a nonparametric waiting-time distribution.

    Parameters
    ----------
    durations : array-like of non-negative whole days
    max_day : int, optional
        Cap on the number of days in the result. Durations at or past it are
        pooled on day max_day - 1. The support otherwise ends at the longest
        observed duration, since trailing empty days have no defined hazard.
    """
    arr = _as_durations(durations)
    if max_day is not None:
        if max_day < 1:
            raise InvalidWeightsError(f"max_day must be >= 1, got {max_day}")
        arr = np.minimum(arr, max_day - 1)
    return NonparametricDistribution(np.bincount(arr), config=config)
