#!filepath: gaussnb/config/app_config.py
from __future__ import annotations

import os

import yaml
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .model_config import GaussianNbConfig
from .training_config import IncrementalTrainingConfig


def package_root() -> str:
    """
    gaussnb/config/app_config.py -> gaussnb/config -> gaussnb
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    model: GaussianNbConfig = Field(default_factory=GaussianNbConfig)
    training: IncrementalTrainingConfig = Field(
        default_factory=IncrementalTrainingConfig
    )

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config.
        - default: <package_root>/config/base.yml
        - independent of the current working directory
        """
        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        return cls(**raw)
