"""
Trainer backed by scikit-learn estimators.

The complete configuration names the estimator, the data and the
training-control settings::

    {
        "estimator": LogisticRegression(),
        "x": X,
        "y": y,
        "params": {"C": 0.5},
        "metric": "roc_auc",
        "trControl": {"method": "cv", "number": 5},
    }

Resampling splits draw their random state from the global NumPy
generator, so resetting the seed before each fit gives every model the
same folds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import numpy as np
from sklearn.base import BaseEstimator, clone
from sklearn.model_selection import KFold, RepeatedKFold, cross_val_score

logger = logging.getLogger(__name__)

RESAMPLING_METHODS = ("none", "cv", "repeatedcv")
KNOWN_KEYS = {"estimator", "x", "y", "params", "metric", "trControl"}


@dataclass
class FittedModel:
    estimator: BaseEstimator
    metric: Optional[str] = None
    resample_scores: Optional[np.ndarray] = None

    @property
    def mean_score(self) -> Optional[float]:
        if self.resample_scores is None or len(self.resample_scores) == 0:
            return None
        return float(np.mean(self.resample_scores))


def _random_state() -> int:
    return int(np.random.randint(np.iinfo(np.int32).max))


def build_splitter(control: Mapping[str, Any]):
    """Create the cross-validation splitter described by a training-control mapping."""
    method = control.get("method", "none")
    if method not in RESAMPLING_METHODS:
        raise ValueError(f"Unsupported resampling method: {method}")
    if method == "none":
        return None

    number = int(control.get("number", 10))
    if method == "cv":
        if control.get("shuffle", True):
            return KFold(n_splits=number, shuffle=True, random_state=_random_state())
        return KFold(n_splits=number)
    return RepeatedKFold(
        n_splits=number,
        n_repeats=int(control.get("repeats", 1)),
        random_state=_random_state(),
    )


class SklearnTrainer:
    """Fit a fresh clone of the configured estimator."""

    def __init__(self, default_metric: Optional[str] = None):
        self.default_metric = default_metric

    def fit(self, config: Mapping[str, Any]) -> FittedModel:
        if "estimator" not in config:
            raise ValueError("Configuration is missing 'estimator'")
        if "x" not in config:
            raise ValueError("Configuration is missing 'x'")

        unused = sorted(set(config) - KNOWN_KEYS)
        if unused:
            logger.debug("Ignoring configuration keys not used by scikit-learn: %s", unused)

        estimator = clone(config["estimator"])
        params: Dict[str, Any] = dict(config.get("params") or {})
        if params:
            estimator.set_params(**params)

        x = config["x"]
        y = config.get("y")
        metric = config.get("metric", self.default_metric)
        control = config.get("trControl") or {}

        scores = None
        splitter = build_splitter(control)
        if splitter is not None:
            scores = cross_val_score(clone(estimator), x, y, cv=splitter, scoring=metric)
            logger.info(
                "Resampled %s: %s=%.4f over %d folds",
                type(estimator).__name__,
                metric or "score",
                float(np.mean(scores)),
                len(scores),
            )

        estimator.fit(x, y)
        return FittedModel(estimator=estimator, metric=metric, resample_scores=scores)

    def __repr__(self) -> str:
        return f"SklearnTrainer(default_metric={self.default_metric!r})"


__all__ = ["FittedModel", "SklearnTrainer", "build_splitter"]
