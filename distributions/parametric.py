"""
ParametricDistribution — discretise a continuous waiting-time law onto days.

The continuous law comes from scipy.stats. Day k covers [k, k+1):
  p[k] = sf(k) - sf(k+1)           for k < max_day - 1
  p[max_day - 1] = sf(max_day - 1)  (last day absorbs the tail)

so the tabulated pmf sums to 1 and the hazard closes at 1 on the last day,
the same boundary rule the nonparametric variant uses. The hazards are then
computed by a NonparametricDistribution built on that pmf.

max_day defaults to ceil(ppf(1 - tail_mass)).
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Mapping, Optional, Tuple

import numpy as np
from scipy import stats

from core.config import DEFAULT_CONFIG, HazardConfig
from core.errors import InvalidParametersError

from .base import Distribution
from .nonparametric import NonparametricDistribution

logger = logging.getLogger(__name__)


def _gamma(p: Mapping[str, float]):
    return stats.gamma(a=p["shape"], scale=p["scale"])


def _weibull(p: Mapping[str, float]):
    return stats.weibull_min(c=p["shape"], scale=p["scale"])


def _lognormal(p: Mapping[str, float]):
    return stats.lognorm(s=p["sigma"], scale=math.exp(p["mu"]))


def _exponential(p: Mapping[str, float]):
    return stats.expon(scale=1.0 / p["rate"])


# family -> (required parameters, parameters that must be > 0, frozen scipy law)
FAMILIES: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...], Callable]] = {
    "gamma": (("shape", "scale"), ("shape", "scale"), _gamma),
    "weibull": (("shape", "scale"), ("shape", "scale"), _weibull),
    "lognormal": (("mu", "sigma"), ("sigma",), _lognormal),
    "exponential": (("rate",), ("rate",), _exponential),
}


def _frozen_law(family: str, params: Mapping[str, float]):
    if family not in FAMILIES:
        raise KeyError(
            f"Unknown parametric family '{family}'. "
            f"Available: {list(FAMILIES.keys())}"
        )
    required, positive, build = FAMILIES[family]
    missing = [name for name in required if name not in params]
    if missing:
        raise InvalidParametersError(f"'{family}' is missing parameters: {missing}")
    for name in required:
        value = float(params[name])
        if not math.isfinite(value):
            raise InvalidParametersError(f"'{family}' parameter {name}={value!r} must be finite")
        if name in positive and value <= 0:
            raise InvalidParametersError(f"'{family}' parameter {name}={value!r} must be > 0")
    return build({name: float(params[name]) for name in required})


def discretize(law, max_day: int) -> np.ndarray:
    """Day-level pmf of a frozen scipy law truncated at max_day."""
    sf = law.sf(np.arange(max_day + 1, dtype=float))
    sf[0] = 1.0  # supports start at 0, guard against -0 rounding
    pmf = sf[:-1] - sf[1:]
    pmf[-1] = sf[max_day - 1]
    return np.clip(pmf, 0.0, None)


class ParametricDistribution(Distribution):
    """
    Waiting time drawn from a named continuous family, tabulated per day.

    Usage:
        dist = ParametricDistribution("gamma", {"shape": 2.0, "scale": 3.0})
        dist.get_transition_prob(4)
    """

    def __init__(
        self,
        family: str,
        params: Mapping[str, float],
        *,
        max_day: Optional[int] = None,
        config: Optional[HazardConfig] = None,
    ):
        cfg = config or DEFAULT_CONFIG
        self._family = family.strip().lower()
        self._params = {k: float(v) for k, v in params.items()}
        self._law = _frozen_law(self._family, self._params)

        if max_day is None:
            max_day = cfg.default_max_day
        if max_day is None:
            upper = float(self._law.ppf(1.0 - cfg.tail_mass))
            if not math.isfinite(upper) or upper > cfg.max_support_days:
                raise InvalidParametersError(
                    f"{self._family}{self._params} needs {upper!r} days to reach "
                    f"tail_mass={cfg.tail_mass}; more than max_support_days={cfg.max_support_days}"
                )
            max_day = max(int(math.ceil(upper)), 1)
        if max_day < 1:
            raise InvalidParametersError(f"max_day must be >= 1, got {max_day}")
        if max_day > cfg.max_support_days:
            raise InvalidParametersError(
                f"max_day={max_day} exceeds max_support_days={cfg.max_support_days}"
            )
        logger.debug("Discretising %s%r over %d days", self._family, self._params, max_day)

        pmf = discretize(self._law, max_day)
        support_end = int(np.flatnonzero(pmf > 0)[-1]) + 1
        if support_end < max_day:
            # survival function underflowed to 0 before max_day
            logger.warning(
                "%s has no mass after day %d; truncating max_day from %d",
                self._family, support_end - 1, max_day,
            )
            pmf = pmf[:support_end]

        self._table = NonparametricDistribution(pmf, config=cfg)

    @property
    def dist_name(self) -> str:
        return self._family

    @property
    def family(self) -> str:
        return self._family

    @property
    def params(self) -> Dict[str, float]:
        return dict(self._params)

    @property
    def law(self):
        """Frozen scipy.stats law before discretisation."""
        return self._law

    @property
    def max_day(self) -> int:
        return self._table.max_day

    @property
    def transition_prob(self) -> np.ndarray:
        return self._table.transition_prob

    def get_transition_prob(self, index: int) -> float:
        return self._table.get_transition_prob(index)

    def get_waiting_time(self) -> np.ndarray:
        return self._table.get_waiting_time()

    def transition_probs(self, days) -> np.ndarray:
        return self._table.transition_probs(days)

    def mean(self) -> float:
        """Expected waiting day of the truncated, discretised law."""
        return self._table.mean()

    def to_dataframe(self):
        return self._table.to_dataframe()

    def __len__(self) -> int:
        return self.max_day

    def __repr__(self) -> str:
        return f"ParametricDistribution({self._family}, {self._params}, max_day={self.max_day})"
