from __future__ import annotations

import numpy as np
import pytest

from gaussnb.engines.statistics_merger import batch_mean_variance, update_mean_variance
from gaussnb.model.class_statistics import ClassStatistics


def stats_of(x: np.ndarray) -> ClassStatistics:
    mu, var = batch_mean_variance(x)
    return ClassStatistics(class_count=x.shape[0], theta=mu, sigma=var)


# -----------------------------------------------------------------------------
# 1. population variance (ddof = 0)
# -----------------------------------------------------------------------------
def test_batch_mean_variance_is_population():
    x = np.array([[1.0, 10.0], [3.0, 10.0]])

    mu, var = batch_mean_variance(x)

    np.testing.assert_allclose(mu, [2.0, 10.0])
    np.testing.assert_allclose(var, [1.0, 0.0])


# -----------------------------------------------------------------------------
# 2. degenerate cases
# -----------------------------------------------------------------------------
def test_empty_batch_leaves_statistics_unchanged():
    old = ClassStatistics(class_count=5, theta=np.array([1.0, 2.0]), sigma=np.array([0.5, 0.25]))

    mu, var = update_mean_variance(old, np.zeros((0, 2)))

    np.testing.assert_array_equal(mu, old.theta)
    np.testing.assert_array_equal(var, old.sigma)


def test_no_prior_state_takes_batch_statistics():
    x = np.array([[0.0, 1.0], [2.0, 5.0], [4.0, 9.0]])

    mu, var = update_mean_variance(ClassStatistics(), x)

    np.testing.assert_allclose(mu, x.mean(axis=0))
    np.testing.assert_allclose(var, x.var(axis=0))


def test_merge_does_not_mutate_old_state():
    old = stats_of(np.array([[1.0], [2.0]]))
    theta, sigma = old.theta.copy(), old.sigma.copy()

    update_mean_variance(old, np.array([[7.0], [9.0]]))

    np.testing.assert_array_equal(old.theta, theta)
    np.testing.assert_array_equal(old.sigma, sigma)
    assert old.class_count == 2


# -----------------------------------------------------------------------------
# 3. merge == statistics of the concatenation
# -----------------------------------------------------------------------------
@pytest.mark.parametrize("split", [1, 3, 10, 19])
def test_merge_matches_concatenation(split):
    rng = np.random.default_rng(split)
    x = rng.normal(loc=5.0, scale=[0.01, 1.0, 100.0], size=(20, 3))

    old = stats_of(x[:split])
    mu, var = update_mean_variance(old, x[split:])

    np.testing.assert_allclose(mu, x.mean(axis=0), rtol=1e-10)
    np.testing.assert_allclose(var, x.var(axis=0), rtol=1e-10)


def test_merge_is_order_independent():
    rng = np.random.default_rng(3)
    a = rng.normal(size=(7, 2))
    b = rng.normal(loc=3.0, size=(11, 2))

    ab = update_mean_variance(stats_of(a), b)
    ba = update_mean_variance(stats_of(b), a)

    np.testing.assert_allclose(ab[0], ba[0], rtol=1e-12)
    np.testing.assert_allclose(ab[1], ba[1], rtol=1e-12)


def test_merge_parallel_axis_term():
    """
    Two constant partitions {0, 0} and {2, 2}:
    within-partition variance is 0, total variance comes only from the
    distance between the means.
    """
    old = stats_of(np.array([[0.0], [0.0]]))

    mu, var = update_mean_variance(old, np.array([[2.0], [2.0]]))

    np.testing.assert_allclose(mu, [1.0])
    np.testing.assert_allclose(var, [1.0])
