from __future__ import annotations

import numpy as np
import pytest

from distributions import NonparametricDistribution, ParametricDistribution, WaitingTimeSampler


def test_draws_match_the_waiting_time_distribution():
    dist = NonparametricDistribution([1, 1, 2])
    draws = WaitingTimeSampler(dist, n_draws=20_000, seed=1).sample()
    assert draws.n_draws == 20_000
    assert draws.days.min() >= 0
    assert draws.days.max() < dist.max_day
    np.testing.assert_allclose(draws.empirical_pmf(dist.max_day), [0.25, 0.25, 0.5], atol=0.02)


def test_zero_probability_days_are_never_drawn():
    dist = NonparametricDistribution([1, 0, 0, 1])
    draws = WaitingTimeSampler(dist, n_draws=2_000, seed=3).sample()
    assert set(np.unique(draws.days)) <= {0, 3}


def test_same_seed_same_draws():
    dist = ParametricDistribution("gamma", {"shape": 3.0, "scale": 2.0})
    a = WaitingTimeSampler(dist, n_draws=500, seed=9).sample()
    b = WaitingTimeSampler(dist, n_draws=500, seed=9).sample()
    np.testing.assert_array_equal(a.days, b.days)
    assert a.days.max() <= dist.max_day


def test_tables():
    draws = WaitingTimeSampler(NonparametricDistribution([1, 1]), n_draws=10).sample()
    assert list(draws.to_dataframe().columns) == ["draw_id", "waiting_day"]
    summary = draws.summary()
    assert {"Mean", "Std", "P50"} <= set(summary.columns)


def test_rejects_empty_sampling():
    with pytest.raises(ValueError):
        WaitingTimeSampler(NonparametricDistribution([1]), n_draws=0)


def test_empirical_pmf_defaults_to_longest_draw():
    draws = WaitingTimeSampler(NonparametricDistribution([0, 1, 1]), n_draws=200, seed=5).sample()
    pmf = draws.empirical_pmf()
    assert len(pmf) == draws.days.max() + 1
    assert pmf.sum() == pytest.approx(1.0)
    assert pmf[0] == 0.0
