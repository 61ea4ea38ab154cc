# gaussnb/dataset.py
from __future__ import annotations

from typing import Any, Iterator, List, Optional

import numpy as np
import pandas as pd

from gaussnb.utils.errors import MultiOutputNotSupported


def as_records(x: Any) -> np.ndarray:
    """
    Coerce a feature matrix to a 2-D floating ndarray.

    - floating dtypes are kept (caller-chosen precision)
    - everything else is promoted to float64
    """
    if isinstance(x, pd.DataFrame):
        x = x.to_numpy()

    arr = np.asarray(x)

    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)

    if arr.ndim != 2:
        raise ValueError(
            f"feature matrix must be 2-D (rows x features), got ndim={arr.ndim}"
        )

    return arr


def as_targets(y: Any) -> np.ndarray:
    """
    Coerce labels to an ndarray, keeping a column axis for 2-D input.
    """
    if isinstance(y, (pd.Series, pd.DataFrame)):
        return y.to_numpy()
    return np.asarray(y)


class Dataset:
    """
    Dataset (records + targets)

    Contract:
    - records: 2-D floating ndarray, rows = samples
    - targets: one label per row; 1-D, or 2-D with exactly one column
      (anything wider is rejected lazily by try_single_target)
    - labels are hashable and totally ordered
    """

    def __init__(self, records: Any, targets: Any):
        self.records = as_records(records)
        self.targets = as_targets(targets)

        if self.targets.ndim == 0:
            raise ValueError("targets must have one entry per row")

        if len(self.targets) != self.records.shape[0]:
            raise ValueError(
                f"row count mismatch: records={self.records.shape[0]} "
                f"targets={len(self.targets)}"
            )

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def nrows(self) -> int:
        return self.records.shape[0]

    @property
    def ncols(self) -> int:
        return self.records.shape[1]

    def __len__(self) -> int:
        return self.nrows

    # ------------------------------------------------------------------
    # Targets
    # ------------------------------------------------------------------
    def try_single_target(self) -> np.ndarray:
        """
        Return the label vector, or raise MultiOutputNotSupported.
        """
        y = self.targets

        if y.ndim == 1:
            return y

        n_targets = int(np.prod(y.shape[1:]))
        if n_targets != 1:
            raise MultiOutputNotSupported(n_targets)

        return y.reshape(-1)

    def labels(self) -> List[Any]:
        """
        Distinct labels present in the targets, deduplicated and sorted.
        """
        return sorted(set(self.try_single_target().tolist()))

    # ------------------------------------------------------------------
    # Chunking
    # ------------------------------------------------------------------
    def chunks(self, size: int) -> Iterator["Dataset"]:
        """
        Contiguous chunks of `size` rows; the last one may be shorter.
        Records are views, no copy.
        """
        if size <= 0:
            raise ValueError(f"chunk size must be positive, got {size}")

        for start in range(0, self.nrows, size):
            yield Dataset(
                self.records[start:start + size],
                self.targets[start:start + size],
            )

    # ------------------------------------------------------------------
    # Construction from a frame
    # ------------------------------------------------------------------
    @classmethod
    def from_frame(
            cls,
            df: pd.DataFrame,
            *,
            label_column: str,
            feature_columns: Optional[list[str]] = None,
            drop_na: bool = True,
    ) -> "Dataset":
        """
        Build a dataset from one DataFrame.

        Numeric sanitization:
        1) inf -> NaN
        2) drop rows with any missing feature / label (if drop_na)
        """
        if feature_columns is None:
            feature_columns = [c for c in df.columns if c != label_column]

        X = df[feature_columns].copy()
        y = df[label_column].copy()

        X.replace([np.inf, -np.inf], np.nan, inplace=True)

        if drop_na:
            mask = X.notna().all(axis=1) & y.notna()
            X = X.loc[mask]
            y = y.loc[mask]

        return cls(X, y)

    def __repr__(self) -> str:
        return f"Dataset(nrows={self.nrows}, ncols={self.ncols})"
