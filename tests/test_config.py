from __future__ import annotations

import pytest

from core.config import HazardConfig
from core.errors import DistributionError, InvalidParametersError
from distributions import ParametricDistribution


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tail_mass": 0.0},
        {"tail_mass": -0.1},
        {"tail_mass": 1.0},
        {"tail_mass": float("nan")},
        {"normalization_atol": -1e-9},
        {"normalization_atol": float("nan")},
        {"default_max_day": 0},
        {"max_support_days": 0},
    ],
)
def test_out_of_range_settings_are_rejected(kwargs):
    with pytest.raises(InvalidParametersError) as excinfo:
        HazardConfig(**kwargs)
    assert isinstance(excinfo.value, DistributionError)


def test_defaults_are_valid():
    cfg = HazardConfig()
    assert 0 < cfg.tail_mass < 1
    assert cfg.default_max_day is None
    assert cfg.max_support_days >= 1


def test_default_max_day_sets_parametric_support():
    cfg = HazardConfig(default_max_day=12)
    dist = ParametricDistribution("gamma", {"shape": 2.0, "scale": 2.0}, config=cfg)
    assert dist.max_day == 12

    explicit = ParametricDistribution("gamma", {"shape": 2.0, "scale": 2.0}, max_day=5, config=cfg)
    assert explicit.max_day == 5
