"""
Global Configuration and Defaults.

Centralizes the dataset location, the edge color palette, and loading of
the optional ``.kglight/config.yaml`` project file.
"""

import logging
import os
import re
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.errors import ConfigError

logger = logging.getLogger(__name__)

# --- Locations ---
CONFIG_PATH = Path(".kglight/config.yaml")
DEFAULT_DATASET = "systems-components-inventory-tags.csv"
DEFAULT_OUTPUT = "graph.html"

# Overrides the dataset path from the config file
DATASET_ENV_VAR = "KGLIGHT_DATASET"

# --- Colors ---
# Fallback for integration types without an assigned color
NEUTRAL_COLOR = "#999999"

DEFAULT_EDGE_COLORS: Dict[str, str] = {
    "REST-API": "#3b82f6",
    "Batch": "#f59e0b",
    "Event": "#22c55e",
    "File-Transfer": "#a855f7",
    "Database": "#ef4444",
    "Messaging": "#14b8a6",
}

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def validate_color(color: str) -> str:
    """Return the color lowercased, or raise ValueError if it is not #rgb/#rrggbb."""
    color = color.strip()
    if not _HEX_COLOR.match(color):
        raise ValueError(f"Invalid color {color!r}, expected #rgb or #rrggbb")
    return color.lower()


class Settings(BaseModel):
    """Project settings as stored in .kglight/config.yaml."""
    dataset: str = DEFAULT_DATASET
    output: str = DEFAULT_OUTPUT
    colors: Dict[str, str] = Field(default_factory=dict)

    @field_validator("colors")
    @classmethod
    def _check_colors(cls, value: Dict[str, str]) -> Dict[str, str]:
        return {k: validate_color(v) for k, v in value.items()}


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Load settings from the config file, falling back to defaults.

    A missing file is not an error. A file that is not valid YAML, or does
    not match the settings schema, raises ConfigError.
    """
    path = config_path or CONFIG_PATH
    data = {}

    if path.exists():
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping in {path}")
        logger.debug("Loaded settings from %s", path)

    try:
        settings = Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    env_dataset = os.getenv(DATASET_ENV_VAR)
    if env_dataset:
        settings = settings.model_copy(update={"dataset": env_dataset})

    return settings


def write_settings(settings: Settings, config_path: Optional[Path] = None) -> Path:
    """Write settings to the config file, creating its directory."""
    path = config_path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(settings.model_dump(), f, sort_keys=False, default_flow_style=False)
    return path
