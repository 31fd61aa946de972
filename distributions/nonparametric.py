"""
NonparametricDistribution — hazards from an arbitrary discrete waiting-time pmf.

Given weights w[0..N-1] (P(event on day k), possibly unnormalised):
  1. Normalise so the weights sum to 1
  2. Survival mass S(k) = w[k] + w[k+1] + ... + w[N-1]
  3. Transition probability h(k) = w[k] / S(k)
  4. max_day = N; any day >= max_day has transition probability 1

Example:
  [1, 1, 2] -> waiting time [0.25, 0.25, 0.5]
            -> survival     [1.0, 0.75, 0.5]
            -> hazards      [0.25, 0.333, 1.0]
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import pandas as pd

from core.config import DEFAULT_CONFIG, NONPARAMETRIC, HazardConfig
from core.utils import (
    WeightsLike,
    as_weights,
    normalize,
    readonly,
    saturating_lookup,
    survival_mass,
    transition_probabilities,
)

from .base import Distribution

logger = logging.getLogger(__name__)


class NonparametricDistribution(Distribution):
    """
    Waiting-time distribution given day by day.

    Both sequences are computed once here and stored read-only.
    """

    dist_name = NONPARAMETRIC

    def __init__(self, waiting_time: WeightsLike, *, config: Optional[HazardConfig] = None):
        cfg = config or DEFAULT_CONFIG
        pmf = normalize(as_weights(waiting_time), atol=cfg.normalization_atol)
        self._waiting_time = readonly(pmf)
        self._survival = readonly(survival_mass(pmf))
        self._transition_prob = readonly(transition_probabilities(pmf))
        self._max_day = int(self._transition_prob.size)
        logger.debug("Built %s distribution with max_day=%d", self.dist_name, self._max_day)

    @property
    def max_day(self) -> int:
        return self._max_day

    @property
    def transition_prob(self) -> np.ndarray:
        return self._transition_prob.copy()

    @property
    def survival(self) -> np.ndarray:
        return self._survival.copy()

    def get_transition_prob(self, index: int) -> float:
        if index < 0:
            raise ValueError(f"Day index must be non-negative, got {index}")
        if index >= self._max_day:
            return 1.0
        return float(self._transition_prob[index])

    def get_waiting_time(self) -> np.ndarray:
        return self._waiting_time.copy()

    def transition_probs(self, days) -> np.ndarray:
        return saturating_lookup(self._transition_prob, days)

    def mean(self) -> float:
        """Expected waiting day."""
        return float(np.dot(np.arange(self._max_day), self._waiting_time))

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({
            "day": np.arange(self._max_day),
            "waiting_time": self._waiting_time,
            "survival": self._survival,
            "transition_prob": self._transition_prob,
        })

    def __len__(self) -> int:
        return self._max_day

    def __repr__(self) -> str:
        return (
            f"NonparametricDistribution(max_day={self._max_day}, "
            f"mean={self.mean():.4f})"
        )
