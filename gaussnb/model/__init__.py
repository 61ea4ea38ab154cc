from .class_statistics import ClassStatistics
from .base_nb import BaseNb
from .gaussian_nb import GaussianNb

__all__ = ["ClassStatistics", "BaseNb", "GaussianNb"]
