# gaussnb/engines/predictor.py
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Tuple

import numpy as np
from scipy.special import logsumexp

from gaussnb.dataset import as_records
from gaussnb.utils.errors import FeatureMismatch, NotFitted

if TYPE_CHECKING:
    from gaussnb.model.base_nb import BaseNb
    from gaussnb.model.gaussian_nb import GaussianNb


_LOG_2PI = np.log(2.0 * np.pi)


def gaussian_joint_log_likelihood(model: "GaussianNb", x: Any) -> Dict[Any, np.ndarray]:
    """
    Unnormalized log posterior of each class for each row of x:

        ln(prior) - 0.5 * sum_j ln(2*pi*sigma_j) - 0.5 * sum_j (x_j - theta_j)^2 / sigma_j

    Keys are in ascending label order. Read-only on the model.
    """
    x = as_records(x)

    if not model.is_fitted:
        raise NotFitted("GaussianNb has not seen any data")

    if x.shape[1] != model.n_features:
        raise FeatureMismatch(expected=model.n_features, got=x.shape[1])

    jll: Dict[Any, np.ndarray] = {}

    for label, info in model.iter_class_info():
        log_prior = np.log(info.prior)

        # constant part: normalization of the Gaussian density
        n_ij = -0.5 * np.sum(_LOG_2PI + np.log(info.sigma))

        dist = np.sum((x - info.theta) ** 2 / info.sigma, axis=1)

        jll[label] = (log_prior + n_ij - 0.5 * dist).astype(x.dtype, copy=False)

    return jll


def _stack(jll: Dict[Any, np.ndarray]) -> Tuple[List[Any], np.ndarray]:
    """(classes, likelihood) with likelihood shaped (n_rows, n_classes)."""
    classes = list(jll)
    likelihood = np.column_stack([jll[c] for c in classes])
    return classes, likelihood


def _label_array(classes: List[Any]) -> np.ndarray:
    """1-D label array; object dtype when labels are not scalars."""
    arr = np.asarray(classes)
    if arr.ndim == 1:
        return arr

    arr = np.empty(len(classes), dtype=object)
    for i, c in enumerate(classes):
        arr[i] = c
    return arr


def predict(model: "BaseNb", x: Any) -> np.ndarray:
    """
    Arg-max class per row.

    Ties go to the first class in ascending label order, so the
    result never depends on insertion order.
    """
    x = as_records(x)
    classes, likelihood = _stack(model.joint_log_likelihood(x))

    idx = np.argmax(likelihood, axis=1)
    y = _label_array(classes)[idx]

    assert y.shape[0] == x.shape[0], (
        "The number of data points must match the number of output targets."
    )

    return y


def predict_log_proba(model: "BaseNb", x: Any) -> np.ndarray:
    """
    Log posterior, normalized per row; columns in ascending label order.
    """
    _, likelihood = _stack(model.joint_log_likelihood(x))
    log_evidence = logsumexp(likelihood, axis=1)
    return likelihood - log_evidence[:, np.newaxis]


def predict_proba(model: "BaseNb", x: Any) -> np.ndarray:
    return np.exp(predict_log_proba(model, x))
