"""
Core package — configuration, domain errors, and shared numeric helpers.
No distribution classes live here.
"""

from .config import DEFAULT_CONFIG, NONPARAMETRIC, DistributionSpec, HazardConfig
from .errors import (
    DistributionError,
    EmptyDistributionError,
    ExhaustedMassError,
    InvalidParametersError,
    InvalidWeightsError,
    ZeroMassDistributionError,
)
from .utils import as_weights, normalize, survival_mass, transition_probabilities

__all__ = [
    "DEFAULT_CONFIG",
    "NONPARAMETRIC",
    "DistributionSpec",
    "HazardConfig",
    "DistributionError",
    "EmptyDistributionError",
    "ExhaustedMassError",
    "InvalidParametersError",
    "InvalidWeightsError",
    "ZeroMassDistributionError",
    "as_weights",
    "normalize",
    "survival_mass",
    "transition_probabilities",
]
