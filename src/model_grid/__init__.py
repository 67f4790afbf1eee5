"""
Model grid package.

Declare settings shared across many model configurations, declare
per-model overrides, consolidate both into complete training
configurations and dispatch them to an external trainer.
"""

from ._version import __version__
from .errors import (
    AlreadyTrainedError,
    DuplicateNameError,
    EmptyGridError,
    ModelGridError,
    NotFoundError,
    TrainingFailure,
    TrainingFailureWarning,
)
from .grid import ModelGrid
from .config import consolidate, load_grid, save_grid
from .training import Failure, FitResult, Success, unwrap_fit

__all__ = [
    "__version__",
    "ModelGrid",
    "consolidate",
    "load_grid",
    "save_grid",
    "FitResult",
    "Success",
    "Failure",
    "unwrap_fit",
    "ModelGridError",
    "EmptyGridError",
    "AlreadyTrainedError",
    "DuplicateNameError",
    "NotFoundError",
    "TrainingFailure",
    "TrainingFailureWarning",
]
