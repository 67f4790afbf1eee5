"""
Model grid: shared settings, model-specific settings and their fits.
"""

from __future__ import annotations

import copy
import logging
import warnings
from typing import Any, Dict, List, Mapping, Optional

from .config.merge import consolidate, update_settings
from .errors import (
    AlreadyTrainedError,
    DuplicateNameError,
    EmptyGridError,
    NotFoundError,
    TrainingFailureWarning,
)
from .training.results import Failure, FitResult, Success, is_failure
from .training.trainer import as_trainer, describe_config, resolve_seed_control

logger = logging.getLogger(__name__)

MODEL_NAME_PREFIX = "Model"


class ModelGrid:
    """
    Collection of model configurations trained against shared settings.

    Mutating operations update the grid in place and return it so calls
    can be chained::

        grid = (
            ModelGrid()
            .share_settings(metric="roc_auc", trControl={"method": "cv", "number": 5})
            .add_model(name="LR", estimator=LogisticRegression())
            .add_model(name="RF", estimator=RandomForestClassifier(), custom_control={"number": 3})
        )
        grid.train(SklearnTrainer())

    Fits are kept in ``model_fits`` and dropped whenever the corresponding
    model is edited or removed.
    """

    def __init__(
        self,
        shared_settings: Optional[Mapping[str, Any]] = None,
        models: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ):
        self.shared_settings: Dict[str, Any] = update_settings({}, shared_settings or {})
        self.models: Dict[str, Dict[str, Any]] = {}
        self.model_fits: Dict[str, Any] = {}

        for name, settings in (models or {}).items():
            self._insert(name, settings or {})

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ModelGrid":
        return cls(
            shared_settings=config_dict.get("shared_settings"),
            models=config_dict.get("models"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shared_settings": copy.deepcopy(self.shared_settings),
            "models": copy.deepcopy(self.models),
        }

    def _next_model_name(self) -> str:
        k = 1
        while f"{MODEL_NAME_PREFIX}{k}" in self.models:
            k += 1
        return f"{MODEL_NAME_PREFIX}{k}"

    def _require(self, name: str) -> None:
        if name not in self.models:
            raise NotFoundError(f"There is no model named '{name}' in the model grid.")

    def share_settings(self, **settings: Any) -> "ModelGrid":
        """Set settings shared by all models; existing keys are overwritten."""
        self.shared_settings = update_settings(self.shared_settings, settings)
        logger.debug("Shared settings updated: %s", list(settings.keys()))
        return self

    def add_model(self, name: Optional[str] = None, **settings: Any) -> "ModelGrid":
        """
        Add a model configuration.

        Args:
            name: Unique model name. When omitted, the first free name of the
                form ``Model<k>`` is used.
            **settings: Model-specific settings. A ``custom_control`` mapping
                is merged into the shared ``trControl`` at training time.
        """
        return self._insert(name, settings)

    def _insert(self, name: Optional[str], settings: Mapping[str, Any]) -> "ModelGrid":
        if not name:
            name = self._next_model_name()
        elif name in self.models:
            raise DuplicateNameError(
                f"Model names must be unique; '{name}' is already in the model grid."
            )

        self.models[name] = update_settings({}, settings)
        logger.debug("Added model '%s'", name)
        return self

    def edit_model(self, name: str, /, **settings: Any) -> "ModelGrid":
        """Overwrite settings of an existing model and drop its fit."""
        self._require(name)
        self.models[name] = update_settings(self.models[name], settings)

        if name in self.model_fits:
            del self.model_fits[name]
            logger.info("Removed fit of edited model '%s'", name)
        return self

    def remove_model(self, name: str, /) -> "ModelGrid":
        """Remove a model together with its fit."""
        self._require(name)
        del self.models[name]
        self.model_fits.pop(name, None)
        logger.debug("Removed model '%s'", name)
        return self

    def consolidate(self, name: str) -> Dict[str, Any]:
        """Complete configuration of one model, as handed to the trainer."""
        self._require(name)
        return consolidate(self.shared_settings, self.models[name])

    def pending_models(self) -> List[str]:
        """Names of models without a fit, in declaration order."""
        return [name for name in self.models if name not in self.model_fits]

    def failed_models(self) -> List[str]:
        return [name for name, fit in self.model_fits.items() if is_failure(fit)]

    def _fit_one(self, name: str, trainer, seed_control, resample_seed: Optional[int]) -> FitResult:
        try:
            complete = consolidate(self.shared_settings, self.models[name])
            logger.debug("Configuration of '%s': %s", name, describe_config(complete))
            logger.info("Training of '%s' started.", name)
            # Reset right before the fit so every model sees the same resamples.
            if resample_seed is not None:
                seed_control.set_seed(resample_seed)
            artifact = trainer.fit(complete)
        except Exception as exc:
            logger.warning("Training of '%s' failed: %r", name, exc)
            return Failure(exc)

        logger.info("Training of '%s' completed.", name)
        return Success(artifact)

    def train(
        self,
        trainer: Any,
        train_all: bool = False,
        resample_seed: Optional[int] = 123,
        seed_control: Any = None,
        unwrap: bool = True,
    ) -> "ModelGrid":
        """
        Consolidate and train models of the grid.

        Args:
            trainer: Object with a ``fit(config)`` method, or a function
                called with the complete configuration as keyword arguments.
            train_all: Train every model, not only those without a fit.
            resample_seed: Seed reset before each model's fit so resampling
                is identical across models. ``None`` leaves the seed alone.
            seed_control: Object with ``set_seed(int)``. Defaults to the
                trainer when it provides ``set_seed``, else the global
                ``random``/NumPy seed.
            unwrap: Store bare artifacts instead of ``Success`` values when
                the training pass has no failures.

        Returns:
            The grid with ``model_fits`` updated and sorted by model name.
        """
        if not self.models:
            raise EmptyGridError("No models to train.")

        pending = self.pending_models()
        if not pending and not train_all:
            raise AlreadyTrainedError(
                "It seems all models have already been trained. If you want to "
                "train all of the models regardless, set train_all to True."
            )

        fit_all = train_all or len(pending) == len(self.models)
        names = list(self.models) if fit_all else pending

        seed_control = resolve_seed_control(trainer, seed_control)
        trainer = as_trainer(trainer)

        results: Dict[str, Any] = {
            name: self._fit_one(name, trainer, seed_control, resample_seed) for name in names
        }

        failed = [name for name, result in results.items() if is_failure(result)]
        if failed:
            message = (
                "One or more models threw errors! Their fits are stored as Failure "
                "values. The following models were not trained successfully: "
                + ", ".join(failed)
            )
            logger.warning(message)
            warnings.warn(message, TrainingFailureWarning, stacklevel=2)
        elif unwrap:
            results = {name: result.artifact for name, result in results.items()}

        model_fits = results if fit_all else {**self.model_fits, **results}
        self.model_fits = {name: model_fits[name] for name in sorted(model_fits)}
        return self

    def __len__(self) -> int:
        return len(self.models)

    def __repr__(self) -> str:
        return (
            f"ModelGrid(shared_settings={list(self.shared_settings)}, "
            f"models={list(self.models)}, model_fits={list(self.model_fits)})"
        )


__all__ = ["ModelGrid", "MODEL_NAME_PREFIX"]
