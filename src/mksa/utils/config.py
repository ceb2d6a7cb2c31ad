"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

# Default config directory relative to package root
_PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_CONFIGS_DIR = _PACKAGE_ROOT / "configs"


class MksaConfig(BaseModel):
    """Top-level configuration for the mksa command line."""

    log_level: str = "INFO"
    catalogue_path: str | None = None
    precision: int = Field(default=6, ge=1, le=17)


def load_config(path: str | Path | None = None) -> MksaConfig:
    """Load config from a YAML file.

    Falls back to configs/default.yaml if no path is given, and to
    built-in defaults if the file does not exist.
    """
    if path is None:
        path = _CONFIGS_DIR / "default.yaml"
    path = Path(path)

    if not path.exists():
        return MksaConfig()

    with open(path) as f:
        raw: dict[str, Any] = yaml.safe_load(f) or {}

    return MksaConfig(**raw)
