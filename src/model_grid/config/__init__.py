"""Configuration helpers."""

from .loader import (
    TrainConfig,
    load_config,
    load_grid,
    load_json_config,
    load_yaml_config,
    save_config,
    save_grid,
)
from .merge import (
    CUSTOM_CONTROL_KEY,
    TRAIN_CONTROL_KEY,
    consolidate,
    merge_control,
    update_settings,
)

__all__ = [
    "CUSTOM_CONTROL_KEY",
    "TRAIN_CONTROL_KEY",
    "TrainConfig",
    "consolidate",
    "load_config",
    "load_grid",
    "load_json_config",
    "load_yaml_config",
    "merge_control",
    "save_config",
    "save_grid",
    "update_settings",
]
