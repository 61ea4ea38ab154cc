from dataclasses import dataclass
from typing import Any, Dict

from gaussnb.model.gaussian_nb import GaussianNb


@dataclass(frozen=True)
class TrainResult:
    """
    TrainResult

    Semantics:
    - in-memory result of one incremental training run
    - no I/O (models are not persisted)
    """
    model: GaussianNb
    metrics: Dict[str, Any]
