# gaussnb/config/training_config.py
from __future__ import annotations

from pydantic import BaseModel, Field


class IncrementalTrainingConfig(BaseModel):
    """
    IncrementalTrainingConfig

    chunk_size:
        Rows per fit_with call when a full dataset is streamed.
    evaluate_before_update:
        Score each chunk with the current model before learning from it
        (prequential accuracy).
    """

    chunk_size: int = Field(default=1024, gt=0)
    evaluate_before_update: bool = False
