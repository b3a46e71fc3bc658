"""YAML config loader."""

import logging
from pathlib import Path

import yaml

from tenki.config.schema import TenkiConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None = None) -> TenkiConfig:
    """Load and validate config from a YAML file.

    A missing path or file yields the defaults; invalid values raise
    pydantic.ValidationError.
    """
    if path is None:
        return TenkiConfig()
    path = Path(path)
    if not path.exists():
        logger.info("Config file %s not found, using defaults", path)
        return TenkiConfig()
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return TenkiConfig(**raw)
