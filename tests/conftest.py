# tests/conftest.py
from __future__ import annotations

import numpy as np
import pytest
from loguru import logger

from gaussnb.dataset import Dataset


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture
def two_blob_x() -> np.ndarray:
    """
    Two well separated classes, 2 features:
        class 1 -> bottom-left, class 2 -> top-right
    """
    return np.array(
        [
            [-2.0, -1.0],
            [-1.0, -1.0],
            [-1.0, -2.0],
            [1.0, 1.0],
            [1.0, 2.0],
            [2.0, 1.0],
        ]
    )


@pytest.fixture
def two_blob_y() -> np.ndarray:
    return np.array([1, 1, 1, 2, 2, 2])


@pytest.fixture
def two_blob(two_blob_x, two_blob_y) -> Dataset:
    return Dataset(two_blob_x, two_blob_y)


@pytest.fixture
def two_blob_jll() -> dict:
    """Reference joint log-likelihood of the two-blob model on its own rows."""
    a, b, c, d = (
        -2.276946847943017,
        -1.5269468546930165,
        -25.52694663869301,
        -38.27694652394301,
    )
    return {
        1: np.array([a, b, a, c, d, d]),
        2: np.array([d, c, d, b, a, a]),
    }


@pytest.fixture
def random_dataset() -> Dataset:
    """
    3 classes, 4 features with very different scales.
    """
    rng = np.random.default_rng(7)
    n = 300
    y = rng.integers(0, 3, size=n)
    scales = np.array([1e-3, 1.0, 10.0, 1e3])
    x = rng.normal(size=(n, 4)) * scales + y[:, None] * scales
    return Dataset(x, y)
