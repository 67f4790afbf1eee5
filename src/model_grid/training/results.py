"""Per-model training outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..errors import TrainingFailure


class FitResult:
    """Outcome of fitting one model: either ``Success`` or ``Failure``."""

    ok: bool = False


@dataclass(frozen=True)
class Success(FitResult):
    artifact: Any

    ok = True


@dataclass(frozen=True)
class Failure(FitResult):
    error: BaseException

    ok = False


FitResult.Success = Success
FitResult.Failure = Failure


def is_failure(value: Any) -> bool:
    return isinstance(value, Failure)


def unwrap_fit(value: Any, model_name: Optional[str] = None) -> Any:
    """
    Return the fitted artifact stored for a model.

    Accepts both ``FitResult`` values and bare artifacts, the latter being
    what a grid stores after a training pass without failures. Raises
    ``TrainingFailure`` chained to the original error for a ``Failure``.
    """
    if isinstance(value, Failure):
        raise TrainingFailure(model_name or "<unnamed>", value.error) from value.error
    if isinstance(value, Success):
        return value.artifact
    return value


__all__ = ["FitResult", "Success", "Failure", "is_failure", "unwrap_fit"]
