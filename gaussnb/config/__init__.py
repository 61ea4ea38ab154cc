from .log_config import LogConfig
from .model_config import GaussianNbConfig
from .training_config import IncrementalTrainingConfig
from .app_config import AppConfig

__all__ = [
    "LogConfig",
    "GaussianNbConfig",
    "IncrementalTrainingConfig",
    "AppConfig",
]
