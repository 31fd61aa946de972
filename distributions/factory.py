"""
Pick a distribution variant by name.

Simulation code describes each waiting time with a DistributionSpec (or the
equivalent dict) and gets back something that satisfies the Distribution
interface, without caring which family it is.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Union

from core.config import NONPARAMETRIC, DistributionSpec, HazardConfig

from .base import Distribution
from .nonparametric import NonparametricDistribution
from .parametric import FAMILIES, ParametricDistribution


def available_distributions() -> List[str]:
    return [NONPARAMETRIC, *FAMILIES.keys()]


def make_distribution(
    spec: Union[DistributionSpec, Mapping],
    *,
    config: Optional[HazardConfig] = None,
) -> Distribution:
    """
    Build a distribution from a spec.

    Parameters
    ----------
    spec : DistributionSpec or dict
        e.g. {"name": "nonparametric", "waiting_time": [1, 1, 2]}
        or   {"name": "gamma", "params": {"shape": 2, "scale": 3}, "max_day": 30}
    config : HazardConfig, optional
        Numeric tolerances passed through to the distribution.

    Raises
    ------
    KeyError if the name is not one of available_distributions().
    """
    if not isinstance(spec, DistributionSpec):
        spec = DistributionSpec.model_validate(dict(spec))

    if spec.name == NONPARAMETRIC:
        return NonparametricDistribution(spec.waiting_time, config=config)
    if spec.name in FAMILIES:
        return ParametricDistribution(spec.name, spec.params, max_day=spec.max_day, config=config)
    raise KeyError(
        f"Unknown distribution '{spec.name}'. "
        f"Available: {available_distributions()}"
    )
