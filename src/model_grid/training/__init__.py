"""Training capabilities and results."""

from .results import Failure, FitResult, Success, is_failure, unwrap_fit
from .sklearn_trainer import FittedModel, SklearnTrainer, build_splitter
from .trainer import (
    CallableTrainer,
    GlobalSeed,
    SeedControl,
    Trainer,
    as_trainer,
    resolve_seed_control,
)

__all__ = [
    "CallableTrainer",
    "Failure",
    "FitResult",
    "FittedModel",
    "GlobalSeed",
    "SeedControl",
    "SklearnTrainer",
    "Success",
    "Trainer",
    "as_trainer",
    "build_splitter",
    "is_failure",
    "resolve_seed_control",
    "unwrap_fit",
]
