# gaussnb/model/base_nb.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List

import numpy as np

from gaussnb.engines import predictor


class BaseNb(ABC):
    """
    Fitted Naive Bayes model (family-tagged base).

    Semantics:
    - `family` tags the concrete model family; incremental fitting only
      resumes from a model of its own family
    - prediction is shared: arg-max over joint_log_likelihood
    - fitted models are read-only for consumers
    """

    family: ClassVar[str]

    @property
    @abstractmethod
    def classes(self) -> List[Any]:
        """Known labels, ascending."""
        raise NotImplementedError

    @abstractmethod
    def joint_log_likelihood(self, x: Any) -> Dict[Any, np.ndarray]:
        """
        Unnormalized log posterior per class, keys in ascending label order.
        """
        raise NotImplementedError

    def predict(self, x: Any) -> np.ndarray:
        return predictor.predict(self, x)

    def predict_log_proba(self, x: Any) -> np.ndarray:
        return predictor.predict_log_proba(self, x)

    def predict_proba(self, x: Any) -> np.ndarray:
        return predictor.predict_proba(self, x)
