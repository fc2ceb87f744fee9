from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from resume_analyzer.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"
REQUIRED_SECTIONS = ("ats", "compatibility", "similarity", "suggestions", "extraction")

_cached_config: dict[str, Any] | None = None


def scoring_config_path() -> Path:
    if settings.scoring_config_path:
        return Path(settings.scoring_config_path)
    return DEFAULT_SCORING_CONFIG_PATH


def load_scoring_config(path: str | Path) -> dict[str, Any]:
    """Read and validate a scoring YAML file. Every failure is a RuntimeError."""
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RuntimeError(f"Scoring config not found at '{config_path}'.") from exc
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{config_path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{config_path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{config_path}': expected a top-level mapping.")

    missing = [section for section in REQUIRED_SECTIONS if not isinstance(parsed.get(section), dict)]
    if missing:
        raise RuntimeError(
            f"Invalid scoring config '{config_path}': missing section(s) {', '.join(missing)}."
        )
    return parsed


def get_scoring_config() -> dict[str, Any]:
    global _cached_config

    if _cached_config is None:
        path = scoring_config_path()
        _cached_config = load_scoring_config(path)
        logger.info("scoring_config_loaded path=%s", path)
    return _cached_config


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Look up a dotted key such as 'ats.weights.skills'; missing keys give ``default``."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
