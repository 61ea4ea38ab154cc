#!filepath: gaussnb/__init__.py
"""
gaussnb: Gaussian Naive Bayes with batch and incremental fitting.
"""
from __future__ import annotations

from typing import Any, Optional

from .utils.logger import Logging, init_logging, logs
from .utils.errors import (
    EmptyInput,
    FeatureMismatch,
    InvalidHyperparameter,
    MultiOutputNotSupported,
    NaiveBayesError,
    NotFitted,
    WrongModelVariant,
)
from .config import AppConfig, GaussianNbConfig, IncrementalTrainingConfig, LogConfig
from .dataset import Dataset
from .model import BaseNb, ClassStatistics, GaussianNb
from .engines.model_fitter import GaussianNbFitEngine
from .training.incremental_trainer import IncrementalTrainer
from .training.train_result import TrainResult


def fit(x: Any, y: Any, *, var_smoothing: float = 1e-9) -> GaussianNb:
    """Fit a GaussianNb from scratch on (x, y)."""
    engine = GaussianNbFitEngine(GaussianNbConfig(var_smoothing=var_smoothing))
    return engine.fit(Dataset(x, y))


def fit_with(
        model: Optional[BaseNb],
        x: Any,
        y: Any,
        *,
        var_smoothing: float = 1e-9,
) -> GaussianNb:
    """Merge the batch (x, y) into `model` (None starts a new one)."""
    engine = GaussianNbFitEngine(GaussianNbConfig(var_smoothing=var_smoothing))
    return engine.fit_with(model, Dataset(x, y))


__all__ = [
    "logs", "Logging", "init_logging",
    "NaiveBayesError", "InvalidHyperparameter", "MultiOutputNotSupported",
    "EmptyInput", "FeatureMismatch", "NotFitted", "WrongModelVariant",
    "AppConfig", "GaussianNbConfig", "IncrementalTrainingConfig", "LogConfig",
    "Dataset",
    "BaseNb", "ClassStatistics", "GaussianNb",
    "GaussianNbFitEngine",
    "IncrementalTrainer", "TrainResult",
    "fit", "fit_with",
]
