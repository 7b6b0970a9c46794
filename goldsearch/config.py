"""Project root resolution, session settings and logging setup."""

from __future__ import annotations

import os
import logging
from pathlib import Path

import yaml

from goldsearch.core.problem import DEFAULT_LEFT, DEFAULT_PRECISION, DEFAULT_RIGHT

logger = logging.getLogger(__name__)

_LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, _LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

SETTINGS_FILENAME = "goldsearch.yaml"

DEFAULT_SETTINGS = {
    "function": 0,
    "left": DEFAULT_LEFT,
    "right": DEFAULT_RIGHT,
    "precision": DEFAULT_PRECISION,
}


def get_root() -> Path:
    """Resolve project root: GOLDSEARCH_ROOT env > cwd."""
    if env := os.environ.get("GOLDSEARCH_ROOT"):
        return Path(env).resolve()
    return Path.cwd()


def settings_path(root: Path | None = None) -> Path:
    return (root or get_root()) / SETTINGS_FILENAME


def load_settings(path: Path) -> dict:
    """Read session defaults from a YAML file, falling back to DEFAULT_SETTINGS."""
    if not path.is_file():
        return dict(DEFAULT_SETTINGS)

    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        logger.warning("Bad YAML in %s: %s", path, e)
        return dict(DEFAULT_SETTINGS)

    if not isinstance(loaded, dict):
        logger.warning("Ignoring %s: expected a mapping, got %s", path, type(loaded).__name__)
        return dict(DEFAULT_SETTINGS)

    result = dict(DEFAULT_SETTINGS)
    result.update(loaded)
    return result


def log_level() -> str:
    return logging.getLevelName(logging.getLogger().getEffectiveLevel())
