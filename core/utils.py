from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np
import pandas as pd

from .errors import (
    EmptyDistributionError,
    ExhaustedMassError,
    InvalidWeightsError,
    ZeroMassDistributionError,
)

logger = logging.getLogger(__name__)

WeightsLike = Union[Sequence[float], np.ndarray, pd.Series]


def as_weights(values: WeightsLike) -> np.ndarray:
    """Coerce raw waiting-time weights to a fresh 1-D float array and validate them."""
    if isinstance(values, pd.Series):
        values = values.to_numpy()
    try:
        arr = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidWeightsError(f"Weights must be real numbers: {exc}") from exc
    if arr.ndim != 1:
        raise InvalidWeightsError(f"Weights must be 1-D, got shape {arr.shape}")
    if arr.size == 0:
        raise EmptyDistributionError("Waiting-time distribution needs at least one day.")
    if not np.all(np.isfinite(arr)):
        raise InvalidWeightsError("Weights must be finite.")
    if np.any(arr < 0):
        bad = int(np.flatnonzero(arr < 0)[0])
        raise InvalidWeightsError(f"Negative weight {arr[bad]!r} at day {bad}.")
    return arr


def normalize(weights: np.ndarray, atol: float = 1e-12) -> np.ndarray:
    """Scale weights to sum to 1. Already-normalised input is returned untouched."""
    total = float(weights.sum())
    if not np.isfinite(total):
        # finite weights whose sum overflows; rescale by the largest one first
        weights = weights / weights.max()
        total = float(weights.sum())
    if total == 0.0:
        raise ZeroMassDistributionError("Weights sum to zero; nothing to normalise.")
    if abs(total - 1.0) <= atol:
        return weights
    logger.debug("Normalising waiting-time weights (sum=%r, n_days=%d)", total, weights.size)
    return weights / total


def survival_mass(pmf: np.ndarray) -> np.ndarray:
    """Survival mass S(k) = sum(pmf[k:]), the chance the event has not happened before day k."""
    return np.cumsum(pmf[::-1])[::-1]


def transition_probabilities(pmf: np.ndarray) -> np.ndarray:
    """
    Discrete hazard h(k) = pmf[k] / S(k).

    Raises ExhaustedMassError when S(k) == 0 for some k, i.e. the pmf has
    trailing zero-probability days and the hazard there is undefined.
    """
    surv = survival_mass(pmf)
    empty = np.flatnonzero(surv <= 0.0)
    if empty.size:
        raise ExhaustedMassError(int(empty[0]), pmf.size)
    return pmf / surv


def saturating_lookup(values: np.ndarray, days) -> np.ndarray:
    """Vectorised lookup where any day at or past len(values) maps to 1.0."""
    days = np.asarray(days, dtype=np.int64)
    if days.size and days.min() < 0:
        raise ValueError("Days must be non-negative.")
    out = np.ones(days.shape, dtype=float)
    inside = days < values.size
    out[inside] = values[days[inside]]
    return out


def readonly(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr
