"""Locate and read the BFF's YAML configuration."""

import logging
import os
from pathlib import Path

import yaml

from tymout_bff.config.models import BffConfig

CONFIG_PATH_ENV = "TYMOUT_BFF_CONFIG"

logger = logging.getLogger(__name__)


def load_config(path: Path | str) -> BffConfig:
    """Parse a YAML file into a BffConfig.

    An empty file yields the defaults.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    with Path(path).open() as f:
        raw = yaml.safe_load(f) or {}
    return BffConfig.model_validate(raw)


def get_default_config_path() -> Path:
    """``$TYMOUT_BFF_CONFIG`` if set, else ``configs/default.yaml`` at the repo root."""
    override = os.environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override)
    return Path(__file__).parents[3] / "configs" / "default.yaml"


def resolve_config(path: Path | str | None = None) -> BffConfig:
    """Config for a process start.

    An explicit path must exist. Without one, the default location is used
    when present and built-in defaults otherwise.
    """
    if path is not None:
        return load_config(path)
    default_path = get_default_config_path()
    if default_path.exists():
        return load_config(default_path)
    logger.info(f"No config at {default_path}, using built-in defaults")
    return BffConfig()
