# gaussnb/model/class_statistics.py
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _empty() -> np.ndarray:
    return np.zeros(0, dtype=np.float64)


@dataclass
class ClassStatistics:
    """
    Running aggregate of one class.

    Invariants (outside fit_with):
    - theta / sigma have length == n_features once class_count > 0
    - sigma >= 0 (smoothed)
    - a fresh record (class_count == 0) carries empty vectors
    """

    class_count: int = 0
    prior: float = 0.0
    theta: np.ndarray = field(default_factory=_empty)
    sigma: np.ndarray = field(default_factory=_empty)

    @property
    def n_features(self) -> int:
        return self.theta.shape[0]

    def copy(self) -> "ClassStatistics":
        return ClassStatistics(
            class_count=self.class_count,
            prior=self.prior,
            theta=self.theta.copy(),
            sigma=self.sigma.copy(),
        )

    def update(self, theta: np.ndarray, sigma: np.ndarray, n_new: int) -> None:
        """
        Replace mean / variance with merged values and add the new rows
        to the running count.
        """
        self.theta = theta
        self.sigma = sigma
        self.class_count += n_new
