#!filepath: gaussnb/config/model_config.py
from __future__ import annotations

from pydantic import BaseModel

from gaussnb.utils.errors import InvalidHyperparameter


class GaussianNbConfig(BaseModel):
    """
    Gaussian Naive Bayes hyperparameters.

    var_smoothing:
        Fraction of the largest per-feature variance of the CURRENT batch
        added to every class variance.

    Validation is explicit (check()) and runs at the start of each fit,
    so a negative or NaN value surfaces as InvalidHyperparameter rather than a
    pydantic ValidationError.
    """

    var_smoothing: float = 1e-9

    def check(self) -> "GaussianNbConfig":
        # NaN fails every comparison: reject anything not provably >= 0
        if not self.var_smoothing >= 0:
            raise InvalidHyperparameter(self.var_smoothing)
        return self
