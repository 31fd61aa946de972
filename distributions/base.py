"""
Base class for waiting-time distributions.
Just the interface; each variant computes its own sequences.
"""

from __future__ import annotations

import numpy as np


class Distribution:
    """
    Interface shared by every waiting-time distribution.

    Callers only rely on ``dist_name``, ``max_day``, ``get_transition_prob``
    and ``get_waiting_time``, so variants can be swapped freely.
    """

    dist_name: str = ""

    @property
    def max_day(self) -> int:
        raise NotImplementedError

    def get_transition_prob(self, index: int) -> float:
        raise NotImplementedError

    def get_waiting_time(self) -> np.ndarray:
        raise NotImplementedError

    def transition_probs(self, days) -> np.ndarray:
        """Vectorised get_transition_prob over an array of days."""
        return np.array([self.get_transition_prob(int(d)) for d in np.ravel(days)], dtype=float).reshape(
            np.shape(days)
        )
