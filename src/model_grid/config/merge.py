"""
Consolidation of shared and model-specific settings.

Model-specific settings win over shared settings at the top level. The
reserved ``custom_control`` entry of a model is not copied as-is; it is
deep-merged into the shared ``trControl`` training-control settings so a
model can tweak single resampling options without restating all of them.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

logger = logging.getLogger(__name__)

CUSTOM_CONTROL_KEY = "custom_control"
TRAIN_CONTROL_KEY = "trControl"


def _copy_value(value: Any) -> Any:
    # Opaque objects (datasets, estimators) are shared, containers are copied.
    if isinstance(value, Mapping):
        return {key: _copy_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy_value(item) for item in value]
    return value


def _deep_update(base: Mapping[str, Any], update: Mapping[str, Any]) -> Dict[str, Any]:
    merged = {key: _copy_value(value) for key, value in base.items()}
    for key, value in update.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = _deep_update(merged[key], value)
        else:
            merged[key] = _copy_value(value)
    return merged


def update_settings(settings: Mapping[str, Any], updates: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``settings`` with ``updates`` applied key by key (last write wins)."""
    merged = dict(settings)
    merged.update({key: _copy_value(value) for key, value in updates.items()})
    return merged


def merge_control(control: Any, overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep-merge ``overrides`` into a training-control mapping."""
    if control is None:
        return _deep_update({}, overrides)
    if not isinstance(control, Mapping):
        raise TypeError(
            f"Cannot merge '{CUSTOM_CONTROL_KEY}' into '{TRAIN_CONTROL_KEY}' "
            f"of type {type(control).__name__}; expected a mapping."
        )
    return _deep_update(control, overrides)


def consolidate(shared: Mapping[str, Any], model: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge shared settings with the settings of one model.

    Args:
        shared: Settings shared by every model in the grid.
        model: Settings specific to one model, optionally holding a
            ``custom_control`` mapping of training-control overrides.

    Returns:
        A new complete configuration. Neither input is modified.
    """
    complete = {key: _copy_value(value) for key, value in shared.items()}

    for key, value in model.items():
        if key == CUSTOM_CONTROL_KEY:
            continue
        complete[key] = _copy_value(value)

    custom_control = model.get(CUSTOM_CONTROL_KEY)
    if custom_control is not None:
        if not isinstance(custom_control, Mapping):
            raise TypeError(
                f"'{CUSTOM_CONTROL_KEY}' must be a mapping, got {type(custom_control).__name__}."
            )
        complete[TRAIN_CONTROL_KEY] = merge_control(complete.get(TRAIN_CONTROL_KEY), custom_control)
        logger.debug("Applied custom control overrides: %s", list(custom_control.keys()))

    return complete


__all__ = [
    "CUSTOM_CONTROL_KEY",
    "TRAIN_CONTROL_KEY",
    "consolidate",
    "merge_control",
    "update_settings",
]
