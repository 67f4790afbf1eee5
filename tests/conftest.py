# tests/conftest.py
from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping, Tuple

import pytest

from model_grid import ModelGrid


class RecordingTrainer:
    """Stub trainer recording seed resets and fits in call order."""

    def __init__(self, fail_on: Tuple[str, ...] = ()):
        self.fail_on = set(fail_on)
        self.calls: List[Tuple[str, Any]] = []

    def set_seed(self, seed: int) -> None:
        self.calls.append(("seed", seed))

    def fit(self, config: Mapping[str, Any]) -> Dict[str, Any]:
        self.calls.append(("fit", copy.deepcopy(dict(config))))
        if config.get("method") in self.fail_on:
            raise RuntimeError(f"cannot fit {config.get('method')}")
        return {"fitted": copy.deepcopy(dict(config))}

    @property
    def fitted_configs(self) -> List[Dict[str, Any]]:
        return [payload for kind, payload in self.calls if kind == "fit"]


@pytest.fixture
def trainer() -> RecordingTrainer:
    return RecordingTrainer()


@pytest.fixture
def grid() -> ModelGrid:
    return (
        ModelGrid()
        .share_settings(metric="ROC", trControl={"method": "cv", "number": 5})
        .add_model(name="A", method="glm")
        .add_model(name="B", method="rf", custom_control={"number": 2})
    )
