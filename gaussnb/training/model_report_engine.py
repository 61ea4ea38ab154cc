# gaussnb/training/model_report_engine.py
from __future__ import annotations

from typing import Dict

from sklearn.metrics import (
    accuracy_score,
    f1_score,
    log_loss,
)

from gaussnb.dataset import Dataset
from gaussnb.model.base_nb import BaseNb
from gaussnb.utils.logger import logs


class ModelReportEngine:
    """
    ModelReportEngine

    Responsibility:
    - Score a fitted model on a labelled dataset
    - Return a pure metrics dict (no side effects besides logging)
    """

    def evaluate(self, *, model: BaseNb, dataset: Dataset) -> Dict[str, float]:
        """
        Metrics:
        - accuracy
        - f1 (macro over the model's classes)
        - log_loss (only with >= 2 classes)
        """
        if dataset.nrows == 0:
            raise ValueError("[ModelReportEngine] empty eval dataset")

        y = dataset.try_single_target()

        # --------------------------------------------------
        # Predictions
        # --------------------------------------------------
        y_pred = model.predict(dataset.records)

        metrics: Dict[str, float] = {
            "accuracy": float(accuracy_score(y, y_pred)),
            "f1": float(f1_score(y, y_pred, average="macro", zero_division=0)),
        }

        # --------------------------------------------------
        # Probabilistic metrics
        # --------------------------------------------------
        classes = model.classes
        if len(classes) >= 2:
            unseen = set(y.tolist()) - set(classes)
            if unseen:
                logs.info(
                    f"[ModelReportEngine] labels {sorted(unseen)} unseen by model, skip log_loss"
                )
            else:
                proba = model.predict_proba(dataset.records)
                metrics["log_loss"] = float(log_loss(y, proba, labels=classes))

        return metrics
