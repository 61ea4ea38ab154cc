# tests/training/conftest.py
from __future__ import annotations

import pytest

from gaussnb.config.model_config import GaussianNbConfig
from gaussnb.config.training_config import IncrementalTrainingConfig
from gaussnb.training.incremental_trainer import IncrementalTrainer


@pytest.fixture
def make_trainer():
    """
    Factory fixture for IncrementalTrainer.

    Usage:
        trainer = make_trainer(chunk_size=2)
        trainer = make_trainer(evaluate_before_update=True)
    """

    def _make(
            chunk_size: int = 1024,
            evaluate_before_update: bool = False,
            var_smoothing: float = 1e-9,
    ) -> IncrementalTrainer:
        return IncrementalTrainer(
            model_cfg=GaussianNbConfig(var_smoothing=var_smoothing),
            cfg=IncrementalTrainingConfig(
                chunk_size=chunk_size,
                evaluate_before_update=evaluate_before_update,
            ),
        )

    return _make
