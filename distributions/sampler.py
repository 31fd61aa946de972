"""
Waiting-time sampler — draws N waiting times by walking the hazard sequence.

This is how a day-stepped simulation consumes a distribution: each agent that
is still waiting on day k moves on with probability get_transition_prob(k).

  Day 0: 1000 waiting, h(0)=0.25 -> ~250 leave
  Day 1:  ~750 waiting, h(1)=0.33 -> ~250 leave
  Day 2:  ~500 waiting, h(2)=1.00 -> all leave

Because h(max_day) == 1 every draw finishes by max_day, so the walk is bounded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .base import Distribution

logger = logging.getLogger(__name__)


@dataclass
class SampledWaitingTimes:
    """Output of sampling: one waiting day per draw."""
    days: np.ndarray  # shape (n_draws,), integer days

    @property
    def n_draws(self) -> int:
        return len(self.days)

    def empirical_pmf(self, max_day: Optional[int] = None) -> np.ndarray:
        """Fraction of draws landing on each day 0..max_day-1."""
        length = max_day if max_day is not None else int(self.days.max()) + 1
        counts = np.bincount(np.minimum(self.days, length - 1), minlength=length)
        return counts / self.n_draws

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({
            "draw_id": np.arange(self.n_draws),
            "waiting_day": self.days,
        })

    def summary(self) -> pd.DataFrame:
        """Percentile summary of sampled waiting days."""
        pcts = [0.05, 0.25, 0.50, 0.75, 0.95]
        row = {"Mean": np.mean(self.days), "Std": np.std(self.days)}
        for p in pcts:
            row[f"P{int(p*100):02d}"] = np.percentile(self.days, p * 100)
        return pd.DataFrame([row])


class WaitingTimeSampler:
    """
    Draws waiting times from any Distribution.

    Usage:
        dist = NonparametricDistribution([1, 1, 2])
        sampler = WaitingTimeSampler(dist, n_draws=1000, seed=42)
        draws = sampler.sample()
        # draws.days -> array of 1000 waiting days in [0, dist.max_day]
    """

    def __init__(
        self,
        distribution: Distribution,
        n_draws: int = 1000,
        seed: int = 42,
    ):
        if n_draws < 1:
            raise ValueError(f"n_draws must be >= 1, got {n_draws}")
        self.distribution = distribution
        self.n_draws = n_draws
        self.rng = np.random.default_rng(seed)

    def sample(self) -> SampledWaitingTimes:
        days = np.full(self.n_draws, -1, dtype=np.int64)
        waiting = np.arange(self.n_draws)
        day = 0
        while waiting.size:
            h = self.distribution.get_transition_prob(day)
            leave = self.rng.random(waiting.size) < h
            days[waiting[leave]] = day
            waiting = waiting[~leave]
            day += 1
        logger.debug(
            "Sampled %d waiting times from %s (last day %d)",
            self.n_draws, self.distribution.dist_name, day - 1,
        )
        return SampledWaitingTimes(days=days)
