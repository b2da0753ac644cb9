"""YAML config loader."""

import logging
from pathlib import Path

import yaml

from weatherpage.config.schema import PageConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None = None) -> PageConfig:
    """Load and validate config from a YAML file.

    A missing file (or no path at all) yields the built-in defaults.
    """
    if path is None:
        return PageConfig()
    path = Path(path)
    if not path.exists():
        logger.warning("Config file %s not found, using defaults", path)
        return PageConfig()
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return PageConfig(**raw)
