"""
scikit-learn GaussianNB as reference implementation.

Same smoothing rule (epsilon from the current batch, removed before each
partial update), so both batch and chunked fits must agree.
"""
from __future__ import annotations

import numpy as np
import pytest
from sklearn.naive_bayes import GaussianNB

from gaussnb.config.model_config import GaussianNbConfig
from gaussnb.dataset import Dataset
from gaussnb.engines.model_fitter import GaussianNbFitEngine


def test_batch_fit_matches_sklearn(random_dataset):
    x, y = random_dataset.records, random_dataset.targets

    ref = GaussianNB(var_smoothing=1e-9).fit(x, y)
    model = GaussianNbFitEngine(GaussianNbConfig(var_smoothing=1e-9)).fit(random_dataset)

    assert model.classes == ref.classes_.tolist()
    np.testing.assert_allclose(model.theta, ref.theta_, rtol=1e-9, atol=1e-12)
    np.testing.assert_allclose(model.sigma, ref.var_, rtol=1e-9, atol=1e-12)
    np.testing.assert_allclose(list(model.priors.values()), ref.class_prior_, atol=1e-12)

    np.testing.assert_array_equal(model.predict(x), ref.predict(x))
    np.testing.assert_allclose(model.predict_log_proba(x), ref.predict_log_proba(x), atol=1e-6)


@pytest.mark.parametrize("chunk_size", [13, 100])
def test_chunked_fit_matches_sklearn_partial_fit(random_dataset, chunk_size):
    eng = GaussianNbFitEngine(GaussianNbConfig(var_smoothing=1e-9))
    ref = GaussianNB(var_smoothing=1e-9)
    classes = np.unique(random_dataset.targets)

    model = None
    for chunk in random_dataset.chunks(chunk_size):
        model = eng.fit_with(model, chunk)
        ref.partial_fit(chunk.records, chunk.targets, classes=classes)

    np.testing.assert_allclose(model.theta, ref.theta_, rtol=1e-9, atol=1e-12)
    np.testing.assert_allclose(model.sigma, ref.var_, rtol=1e-9, atol=1e-12)

    x = random_dataset.records
    np.testing.assert_array_equal(model.predict(x), ref.predict(x))
