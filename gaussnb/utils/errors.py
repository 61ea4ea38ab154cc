# gaussnb/utils/errors.py


class NaiveBayesError(RuntimeError):
    """
    Base class for recoverable fitting / inference errors.

    Raised for bad data or bad hyperparameters, detected before any
    numeric work starts. Never retried.
    """


class InvalidHyperparameter(NaiveBayesError, ValueError):
    """Raised when var_smoothing is negative."""

    def __init__(self, var_smoothing: float):
        self.var_smoothing = var_smoothing
        super().__init__(
            f"var_smoothing must be non-negative, got {var_smoothing}"
        )


class MultiOutputNotSupported(NaiveBayesError, ValueError):
    """Raised when the dataset carries more than one target column."""

    def __init__(self, n_targets: int):
        self.n_targets = n_targets
        super().__init__(
            f"expected a single target column, got {n_targets}"
        )


class EmptyInput(NaiveBayesError, ValueError):
    """Raised when the feature matrix has no columns."""


class FeatureMismatch(NaiveBayesError, ValueError):
    """Raised when the column count does not match the fitted model."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(
            f"model was fitted on {expected} features, got {got}"
        )


class NotFitted(NaiveBayesError):
    """Raised when predicting with a model that has seen no data."""


class WrongModelVariant(TypeError):
    """
    Contract violation: an incremental fit was resumed from a model
    of another Naive Bayes family.

    NOT a NaiveBayesError. Callers must not catch it; it signals API
    misuse, not bad data.
    """

    def __init__(self, expected: str, got: str):
        self.expected = expected
        self.got = got
        super().__init__(
            f"wrong model type passed as input: expected {expected!r}, got {got!r}"
        )
