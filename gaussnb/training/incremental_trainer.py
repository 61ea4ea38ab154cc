# gaussnb/training/incremental_trainer.py
from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from gaussnb.config.model_config import GaussianNbConfig
from gaussnb.config.training_config import IncrementalTrainingConfig
from gaussnb.dataset import Dataset
from gaussnb.engines.model_fitter import GaussianNbFitEngine
from gaussnb.model.base_nb import BaseNb
from gaussnb.training.model_report_engine import ModelReportEngine
from gaussnb.training.train_result import TrainResult
from gaussnb.utils.logger import logs


class IncrementalTrainer:
    """
    IncrementalTrainer (ONLINE)

    Semantics:
    - Trainer owns chunk iteration
    - GaussianNbFitEngine owns update semantics
    - Each chunk is consumed once, merged into the model, and discarded
    - With evaluate_before_update, every chunk after the first is scored
      by the current model BEFORE it is learned (prequential accuracy)
    """

    def __init__(
            self,
            *,
            model_cfg: Optional[GaussianNbConfig] = None,
            cfg: Optional[IncrementalTrainingConfig] = None,
    ):
        self.cfg = cfg if cfg is not None else IncrementalTrainingConfig()
        self.engine = GaussianNbFitEngine(model_cfg)
        self.reporter = ModelReportEngine()

    def train(
            self,
            chunks: Iterable[Dataset],
            *,
            model: Optional[BaseNb] = None,
    ) -> TrainResult:
        logs.info("[IncrementalTrainer] START")

        accuracy_series: List[float] = []
        n_chunks = 0
        n_samples = 0

        for chunk in chunks:
            if (
                    self.cfg.evaluate_before_update
                    and model is not None
                    and model.classes
                    and chunk.nrows > 0
            ):
                metrics = self.reporter.evaluate(model=model, dataset=chunk)
                accuracy_series.append(metrics["accuracy"])

            model = self.engine.fit_with(model, chunk)

            n_chunks += 1
            n_samples += chunk.nrows

        if model is None:
            raise ValueError("[IncrementalTrainer] no chunks to train on")

        result_metrics = {
            "n_chunks": n_chunks,
            "n_samples": n_samples,
        }

        if self.cfg.evaluate_before_update:
            result_metrics["prequential_accuracy"] = accuracy_series
            result_metrics["prequential_accuracy_mean"] = (
                float(np.mean(accuracy_series)) if accuracy_series else None
            )

        logs.info(
            f"[IncrementalTrainer] DONE chunks={n_chunks} "
            f"samples={n_samples} classes={model.classes}"
        )

        return TrainResult(model=model, metrics=result_metrics)

    def train_dataset(
            self,
            dataset: Dataset,
            *,
            model: Optional[BaseNb] = None,
    ) -> TrainResult:
        """
        Stream one in-memory dataset in chunks of cfg.chunk_size.
        """
        return self.train(dataset.chunks(self.cfg.chunk_size), model=model)
