# gaussnb/engines/model_fitter.py
from __future__ import annotations

from typing import Optional

import numpy as np

from gaussnb.config.model_config import GaussianNbConfig
from gaussnb.dataset import Dataset
from gaussnb.engines.class_filter import filter_class
from gaussnb.engines.statistics_merger import update_mean_variance
from gaussnb.model.base_nb import BaseNb
from gaussnb.model.gaussian_nb import GaussianNb
from gaussnb.utils.errors import EmptyInput, FeatureMismatch
from gaussnb.utils.logger import logs


class GaussianNbFitEngine:
    """
    GaussianNbFitEngine

    Two entry points, one semantics:
    - fit(dataset)                 : from scratch
    - fit_with(model_in, dataset)  : resume from a previous model

    Contract:
    - fit_with on consecutive chunks == fit on their concatenation
      (up to float rounding and the per-batch epsilon)
    - the model passed in is never mutated; a new GaussianNb is returned
    - callers serialize fit_with calls that share a model lineage
    """

    def __init__(self, cfg: Optional[GaussianNbConfig] = None):
        self.cfg = cfg if cfg is not None else GaussianNbConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def fit(self, dataset: Dataset) -> GaussianNb:
        return self.fit_with(None, dataset)

    @logs.catch(msg="GaussianNb fit_with failed")
    def fit_with(self, model_in: Optional[BaseNb], dataset: Dataset) -> GaussianNb:
        # --------------------------------------------------
        # Validation (before any numeric work)
        # --------------------------------------------------
        self.cfg.check()

        x = dataset.records
        y = dataset.try_single_target()

        if x.shape[1] == 0:
            raise EmptyInput("feature matrix has no columns")

        model = GaussianNb.resume(model_in)

        if model.is_fitted and model.n_features != x.shape[1]:
            raise FeatureMismatch(expected=model.n_features, got=x.shape[1])

        # --------------------------------------------------
        # Smoothing: epsilon from the current batch only
        # --------------------------------------------------
        epsilon = self._epsilon(x)

        # un-smooth stored variances so epsilon does not pile up
        for _, info in model.iter_class_info():
            info.sigma = info.sigma - epsilon

        # --------------------------------------------------
        # Per-class merge
        # --------------------------------------------------
        for label in dataset.labels():
            xclass = filter_class(x, y, label)

            if xclass.shape[0] == 0:
                continue

            info = model.entry(label)
            theta, sigma = update_mean_variance(info, xclass)
            info.update(theta, sigma, xclass.shape[0])

        for _, info in model.iter_class_info():
            info.sigma = info.sigma + epsilon

        self._update_priors(model)
        self._warn_zero_variance(model)

        logs.debug(
            f"[GaussianNbFitEngine] fit_with rows={x.shape[0]} "
            f"features={x.shape[1]} classes={len(model.classes)} "
            f"epsilon={float(epsilon):.3e}"
        )

        return model

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _epsilon(self, x: np.ndarray):
        """
        var_smoothing * largest per-feature variance of the batch.
        A batch without rows contributes no smoothing.
        """
        if x.shape[0] == 0:
            return x.dtype.type(0)

        return self.cfg.var_smoothing * x.var(axis=0, ddof=0).max()

    @staticmethod
    def _warn_zero_variance(model: GaussianNb) -> None:
        """
        sigma == 0 makes the log-likelihood NaN / inf at predict time.
        """
        for label, info in model.iter_class_info():
            zero = np.flatnonzero(info.sigma == 0)
            if zero.size:
                logs.warning(
                    f"[GaussianNbFitEngine] class={label!r} has zero variance "
                    f"on features {zero.tolist()}; predictions will be unreliable "
                    f"(use var_smoothing > 0)"
                )

    @staticmethod
    def _update_priors(model: GaussianNb) -> None:
        total = sum(info.class_count for _, info in model.iter_class_info())
        if total == 0:
            return

        for _, info in model.iter_class_info():
            info.prior = info.class_count / total
