"""
Distributions package — waiting-time distributions and their day-by-day hazards.

  1. nonparametric.py — hazards from an arbitrary discrete waiting-time pmf
  2. parametric.py    — gamma / weibull / lognormal / exponential, discretised on days
  3. factory.py       — build either variant from a DistributionSpec by name
  4. empirical.py     — nonparametric distribution from observed durations
  5. sampler.py       — draw waiting times by walking the hazard sequence
"""

from .base import Distribution
from .nonparametric import NonparametricDistribution
from .parametric import ParametricDistribution
from .factory import available_distributions, make_distribution
from .empirical import EmpiricalSummary, estimate_from_durations, summarize_durations
from .sampler import SampledWaitingTimes, WaitingTimeSampler

__all__ = [
    "Distribution",
    "NonparametricDistribution",
    "ParametricDistribution",
    "available_distributions",
    "make_distribution",
    "EmpiricalSummary",
    "estimate_from_durations",
    "summarize_durations",
    "SampledWaitingTimes",
    "WaitingTimeSampler",
]
