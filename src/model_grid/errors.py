"""Exceptions and warnings raised by the model grid."""

from __future__ import annotations

from typing import Optional


class ModelGridError(Exception):
    """Base class for model grid errors."""


class EmptyGridError(ModelGridError):
    """Raised when training a grid that holds no model configurations."""


class AlreadyTrainedError(ModelGridError):
    """Raised when every model already has a fit and retraining was not requested."""


class DuplicateNameError(ModelGridError, KeyError):
    """Raised when adding a model under a name that is already taken."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class NotFoundError(ModelGridError, KeyError):
    """Raised when editing or removing a model that does not exist."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class TrainingFailure(ModelGridError):
    """Failure of the trainer for a single model."""

    def __init__(self, model_name: str, error: Optional[BaseException] = None):
        self.model_name = model_name
        self.error = error
        message = f"Training of '{model_name}' failed"
        if error is not None:
            message = f"{message}: {error!r}"
        super().__init__(message)


class TrainingFailureWarning(UserWarning):
    """Emitted after training when one or more models could not be fitted."""


__all__ = [
    "ModelGridError",
    "EmptyGridError",
    "AlreadyTrainedError",
    "DuplicateNameError",
    "NotFoundError",
    "TrainingFailure",
    "TrainingFailureWarning",
]
