# gaussnb/engines/class_filter.py
from __future__ import annotations

from typing import Any

import numpy as np


def filter_class(x: np.ndarray, y: np.ndarray, label: Any) -> np.ndarray:
    """
    Rows of `x` whose label equals `label`, in original order.

    No match -> (0, n_features) array, never an error.
    """
    if x.shape[0] != y.shape[0]:
        raise ValueError(
            f"row count mismatch: x={x.shape[0]} y={y.shape[0]}"
        )

    mask = np.asarray(y == label, dtype=bool)
    return x[mask]
