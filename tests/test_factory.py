from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import DistributionSpec
from distributions import (
    NonparametricDistribution,
    ParametricDistribution,
    available_distributions,
    make_distribution,
)


def test_dispatches_on_name():
    nonpar = make_distribution({"name": "nonparametric", "waiting_time": [1, 1, 2]})
    assert isinstance(nonpar, NonparametricDistribution)
    assert nonpar.get_transition_prob(1) == pytest.approx(1 / 3)

    par = make_distribution(DistributionSpec(name="Gamma", params={"shape": 2, "scale": 1}, max_day=15))
    assert isinstance(par, ParametricDistribution)
    assert par.max_day == 15


def test_every_variant_shares_the_contract():
    specs = [
        {"waiting_time": [1, 2, 3]},
        {"name": "gamma", "params": {"shape": 2, "scale": 2}},
        {"name": "weibull", "params": {"shape": 1.2, "scale": 4}},
        {"name": "lognormal", "params": {"mu": 1.0, "sigma": 0.5}},
        {"name": "exponential", "params": {"rate": 0.3}},
    ]
    for spec in specs:
        dist = make_distribution(spec)
        assert dist.dist_name in available_distributions()
        assert dist.get_transition_prob(dist.max_day) == 1.0
        assert len(dist.get_waiting_time()) == dist.max_day


def test_unknown_name():
    with pytest.raises(KeyError):
        make_distribution({"name": "pareto", "params": {"alpha": 1.0}})


def test_spec_validation():
    with pytest.raises(ValidationError):
        DistributionSpec(name="nonparametric")
    with pytest.raises(ValidationError):
        DistributionSpec(name="gamma")
    with pytest.raises(ValidationError):
        DistributionSpec(name="gamma", params={"shape": 1, "scale": 1}, max_day=0)
