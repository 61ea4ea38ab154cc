# gaussnb/model/gaussian_nb.py
from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

import numpy as np

from gaussnb.engines import predictor
from gaussnb.model.base_nb import BaseNb
from gaussnb.model.class_statistics import ClassStatistics
from gaussnb.utils.errors import WrongModelVariant


class GaussianNb(BaseNb):
    """
    Fitted Gaussian Naive Bayes classifier.

    State:
        label -> ClassStatistics(class_count, prior, theta, sigma)

    Only the fit engine writes to a model, and only to a model it has
    just resumed (a copy). Everything handed out here is a copy or a
    read-only view.
    """

    family = "gaussian"

    def __init__(self, class_info: Optional[Dict[Any, ClassStatistics]] = None):
        self._class_info: Dict[Any, ClassStatistics] = (
            dict(class_info) if class_info is not None else {}
        )

    # ------------------------------------------------------------------
    # Resume (explicit, fallible conversion)
    # ------------------------------------------------------------------
    @classmethod
    def resume(cls, model: Optional[BaseNb]) -> "GaussianNb":
        """
        Convert the incoming state of an incremental fit.

        - None        -> empty model
        - GaussianNb  -> deep copy (the caller's model is left untouched)
        - other family -> WrongModelVariant
        """
        if model is None:
            return cls()

        if not isinstance(model, GaussianNb):
            got = getattr(model, "family", type(model).__name__)
            raise WrongModelVariant(expected=cls.family, got=got)

        return cls({label: info.copy() for label, info in model._class_info.items()})

    # ------------------------------------------------------------------
    # Fit-time access (engine only)
    # ------------------------------------------------------------------
    def entry(self, label: Any) -> ClassStatistics:
        """
        Statistics of `label`, created empty on first sight.
        """
        info = self._class_info.get(label)
        if info is None:
            info = self._class_info[label] = ClassStatistics()
        return info

    def iter_class_info(self) -> Iterator[Tuple[Any, ClassStatistics]]:
        """
        (label, statistics) in ascending label order. Do not mutate.
        """
        for label in self.classes:
            yield label, self._class_info[label]

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def classes(self) -> List[Any]:
        return sorted(self._class_info)

    @property
    def is_fitted(self) -> bool:
        return any(info.class_count > 0 for info in self._class_info.values())

    @property
    def n_features(self) -> int:
        for info in self._class_info.values():
            if info.class_count > 0:
                return info.n_features
        return 0

    @property
    def class_count(self) -> Dict[Any, int]:
        return {label: info.class_count for label, info in self.iter_class_info()}

    @property
    def priors(self) -> Dict[Any, float]:
        return {label: info.prior for label, info in self.iter_class_info()}

    @property
    def theta(self) -> np.ndarray:
        """(n_classes, n_features) means, rows in ascending label order."""
        return self._stack("theta")

    @property
    def sigma(self) -> np.ndarray:
        """(n_classes, n_features) smoothed variances, rows in ascending label order."""
        return self._stack("sigma")

    def class_info(self, label: Any) -> ClassStatistics:
        return self._class_info[label].copy()

    def _stack(self, attr: str) -> np.ndarray:
        rows = [getattr(info, attr) for _, info in self.iter_class_info()]
        if not rows:
            return np.zeros((0, 0), dtype=np.float64)
        return np.vstack(rows)

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------
    def joint_log_likelihood(self, x: Any) -> Dict[Any, np.ndarray]:
        return predictor.gaussian_joint_log_likelihood(self, x)

    def __repr__(self) -> str:
        return (
            f"GaussianNb(classes={self.classes}, "
            f"n_features={self.n_features}, "
            f"n_samples={sum(self.class_count.values())})"
        )
