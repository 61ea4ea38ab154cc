# gaussnb/engines/statistics_merger.py
from __future__ import annotations

from typing import Tuple

import numpy as np

from gaussnb.model.class_statistics import ClassStatistics


def batch_mean_variance(x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Population mean / variance (ddof=0) per feature of a non-empty subset.
    """
    return x.mean(axis=0), x.var(axis=0, ddof=0)


def update_mean_variance(
        info_old: ClassStatistics,
        x_new: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Online update of a class's Gaussian mean and variance.

    Combines the stored (count, theta, sigma) with the statistics of
    `x_new` through the sums of squared deviations of both partitions
    (Chan et al. parallel variance). The caller updates the count.

    Returns (theta, sigma); inputs are not modified.
    """
    count_old, mu_old, var_old = info_old.class_count, info_old.theta, info_old.sigma

    # empty subset: nothing to merge
    count_new = x_new.shape[0]
    if count_new == 0:
        return mu_old.copy(), var_old.copy()

    mu_new, var_new = batch_mean_variance(x_new)

    # no prior state: the batch statistics are the statistics
    if count_old == 0:
        return mu_new, var_new

    count_total = count_old + count_new

    mu = (count_new * mu_new + count_old * mu_old) / count_total

    ssd_old = count_old * var_old
    ssd_new = count_new * var_new
    weight = (count_new * count_old) / count_total
    ssd = ssd_old + ssd_new + weight * (mu_old - mu_new) ** 2

    return mu, ssd / count_total
