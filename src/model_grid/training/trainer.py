"""
Capabilities consumed by the grid when training.

A trainer turns one complete configuration into a fitted artifact. A seed
control resets the process-wide random state right before each fit so all
models see the same resampling draws.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Dict, Mapping, Protocol, runtime_checkable

import numpy as np

logger = logging.getLogger(__name__)


@runtime_checkable
class Trainer(Protocol):
    def fit(self, config: Mapping[str, Any]) -> Any:
        ...


@runtime_checkable
class SeedControl(Protocol):
    def set_seed(self, seed: int) -> None:
        ...


class CallableTrainer:
    """Adapt a fitting function called with the configuration as keyword arguments."""

    def __init__(self, fit_fn: Callable[..., Any]):
        if not callable(fit_fn):
            raise TypeError(f"fit_fn must be callable, got {type(fit_fn).__name__}")
        self.fit_fn = fit_fn

    def fit(self, config: Mapping[str, Any]) -> Any:
        return self.fit_fn(**dict(config))

    def __repr__(self) -> str:
        name = getattr(self.fit_fn, "__name__", repr(self.fit_fn))
        return f"CallableTrainer({name})"


class GlobalSeed:
    """Seed Python's ``random`` module and the global NumPy generator."""

    def set_seed(self, seed: int) -> None:
        random.seed(seed)
        np.random.seed(seed)
        logger.debug("Reset global random seed to %d", seed)

    def __repr__(self) -> str:
        return "GlobalSeed()"


def as_trainer(trainer: Any) -> Trainer:
    """Accept a ``Trainer`` or a plain fitting function."""
    if isinstance(trainer, Trainer):
        return trainer
    if callable(trainer):
        return CallableTrainer(trainer)
    raise TypeError(f"Expected a trainer with a 'fit' method or a callable, got {type(trainer).__name__}")


def resolve_seed_control(trainer: Any, seed_control: Any = None) -> SeedControl:
    """Pick the seed control: explicit, else the trainer itself, else the global one."""
    if seed_control is not None:
        return seed_control
    if isinstance(trainer, SeedControl):
        return trainer
    return GlobalSeed()


def describe_config(config: Mapping[str, Any]) -> Dict[str, str]:
    """Short type summary of a configuration, used in debug logging."""
    return {key: type(value).__name__ for key, value in config.items()}


__all__ = [
    "CallableTrainer",
    "GlobalSeed",
    "SeedControl",
    "Trainer",
    "as_trainer",
    "describe_config",
    "resolve_seed_control",
]
