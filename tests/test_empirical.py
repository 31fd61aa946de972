from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from core.errors import EmptyDistributionError, InvalidWeightsError
from distributions import estimate_from_durations, summarize_durations


def test_histogram_of_durations():
    dist = estimate_from_durations([0, 1, 2, 2])
    np.testing.assert_allclose(dist.get_waiting_time(), [0.25, 0.25, 0.5])
    np.testing.assert_allclose(dist.transition_prob, [0.25, 1 / 3, 1.0])


def test_long_durations_are_pooled_on_the_last_day():
    dist = estimate_from_durations([0, 1, 5, 9], max_day=3)
    assert dist.max_day == 3
    np.testing.assert_allclose(dist.get_waiting_time(), [0.25, 0.25, 0.5])


def test_series_with_missing_values():
    dist = estimate_from_durations(pd.Series([1.0, None, 3.0]))
    np.testing.assert_allclose(dist.get_waiting_time(), [0, 0.5, 0, 0.5])


@pytest.mark.parametrize(
    "durations, error",
    [([], EmptyDistributionError), ([1, -2], InvalidWeightsError), ([1.5], InvalidWeightsError)],
)
def test_bad_durations(durations, error):
    with pytest.raises(error):
        estimate_from_durations(durations)


def test_summary():
    summary = summarize_durations([2, 4, 6])
    assert summary.n_observations == 3
    assert summary.mean == pytest.approx(4.0)
    assert summary.std == pytest.approx(2.0)
    assert (summary.min_val, summary.max_val) == (2, 6)
    assert summary.median == pytest.approx(4.0)


def test_max_day_only_caps_the_support():
    assert estimate_from_durations([0, 1, 2], max_day=10).max_day == 3
