"""Loads YAML/JSON configuration files and the package grid settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_grid_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the package grid configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "grid_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


GRID_CONFIG: Dict[str, Any] = load_grid_config()
_RENDER_CONF = GRID_CONFIG.get("render", {}) or {}
EMPTY_GLYPH: str = str(_RENDER_CONF.get("empty_glyph", "."))
FILLED_GLYPH: str = str(_RENDER_CONF.get("filled_glyph", "F"))
_LOG_CONF = GRID_CONFIG.get("logging", {}) or {}
LOG_LEVEL: str = str(_LOG_CONF.get("level", "WARNING")).upper()
LOG_FILE: Optional[str] = _LOG_CONF.get("file") or None


def _check_glyph(value: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError("Glyph must be a single character")


def set_empty_glyph(value: str) -> None:
    """Override the glyph used for unset slots when rendering."""
    global EMPTY_GLYPH
    _check_glyph(value)
    EMPTY_GLYPH = value
    GRID_CONFIG.setdefault("render", {})["empty_glyph"] = value


def set_filled_glyph(value: str) -> None:
    """Override the glyph used for stored values when rendering."""
    global FILLED_GLYPH
    _check_glyph(value)
    FILLED_GLYPH = value
    GRID_CONFIG.setdefault("render", {})["filled_glyph"] = value


def set_log_level(value: str) -> None:
    """Override the log level of every ``array2d`` logger, existing or future."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    GRID_CONFIG.setdefault("logging", {})["level"] = LOG_LEVEL
    for name, obj in list(logging.root.manager.loggerDict.items()):
        if isinstance(obj, logging.Logger) and name.split(".")[0] == "array2d":
            obj.setLevel(LOG_LEVEL)


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "empty_glyph": EMPTY_GLYPH,
        "filled_glyph": FILLED_GLYPH,
        "log_level": LOG_LEVEL,
        "log_file": LOG_FILE,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v!r}")
