"""
Loading and saving of model grid declarations.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

import yaml

if TYPE_CHECKING:
    from ..grid import ModelGrid

logger = logging.getLogger(__name__)


def load_yaml_config(config_path: str) -> Dict[str, Any]:
    """Load YAML configuration file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    logger.info("Loaded configuration from %s", config_path)
    return config or {}


def load_json_config(config_path: str) -> Dict[str, Any]:
    """Load JSON configuration file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = json.load(f)

    logger.info("Loaded configuration from %s", config_path)
    return config


def load_config(config_path: str) -> Dict[str, Any]:
    """Load a YAML or JSON file, picking the parser from the file suffix."""
    config_path = str(config_path)
    if config_path.endswith((".yaml", ".yml")):
        return load_yaml_config(config_path)
    if config_path.endswith(".json"):
        return load_json_config(config_path)
    raise ValueError(f"Unsupported config format: {config_path}")


def save_config(config: Dict[str, Any], save_path: str, fmt: str = "yaml") -> None:
    """Persist configuration to disk."""
    save_path = Path(save_path)

    # Serialize before touching the file so a failure leaves nothing behind.
    try:
        if fmt == "yaml":
            text = yaml.safe_dump(config, default_flow_style=False, sort_keys=False)
        elif fmt == "json":
            text = json.dumps(config, indent=2)
        else:
            raise ValueError(f"Unsupported config format: {fmt}")
    except (yaml.YAMLError, TypeError) as exc:
        raise ValueError(
            f"Configuration cannot be saved as {fmt}; only plain values, lists and "
            f"mappings are supported: {exc}"
        ) from exc

    save_path.parent.mkdir(parents=True, exist_ok=True)
    with open(save_path, "w") as f:
        f.write(text)

    logger.info("Saved configuration to %s", save_path)


def load_grid(config_path: str) -> "ModelGrid":
    """
    Build a model grid from a declaration file.

    The file holds a ``shared_settings`` mapping and a ``models`` mapping of
    model name to model-specific settings. Fits are never part of a
    declaration file.
    """
    from ..grid import ModelGrid

    config = load_config(config_path)
    grid = ModelGrid.from_dict(config)
    logger.info("Loaded model grid with %d models from %s", len(grid.models), config_path)
    return grid


def save_grid(grid: "ModelGrid", save_path: str, fmt: Optional[str] = None) -> None:
    """Persist the declarations of a model grid (shared settings and models)."""
    if fmt is None:
        fmt = "json" if str(save_path).endswith(".json") else "yaml"
    save_config(grid.to_dict(), save_path, fmt)


@dataclass
class TrainConfig:
    train_all: bool = False
    resample_seed: Optional[int] = 123
    unwrap: bool = True

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "TrainConfig":
        training_config = config_dict.get("training") or {}
        return cls(**{k: v for k, v in training_config.items() if k in cls.__annotations__})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "TrainConfig",
    "load_config",
    "load_grid",
    "load_json_config",
    "load_yaml_config",
    "save_config",
    "save_grid",
]
