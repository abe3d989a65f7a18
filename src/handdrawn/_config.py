from __future__ import annotations

import json
import os
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from . import defaults
from .validation import InvalidConfiguration, validate_generation

CONFIG_ENV_VAR = "HANDDRAWN_CONFIG_DIR"
CONFIG_FILENAME = "handdrawn.cfg"
DEFAULT_CONFIG: Dict[str, Any] = {
    "_comment": "Defaults for handdrawn strokes. irregularity is in pixels; segments must be >= 1.",
    "seed": defaults.SEED,
    "segments": defaults.SEGMENTS,
    "irregularity": defaults.IRREGULARITY,
    "stroke_width": defaults.STROKE_WIDTH,
}


@dataclass(frozen=True)
class StrokeDefaults:
    """Resolved stroke defaults from handdrawn.cfg."""

    seed: int
    segments: int
    irregularity: float
    stroke_width: float


def config_dir() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".handdrawn"


def config_file() -> Path:
    return config_dir() / CONFIG_FILENAME


def ensure_user_config() -> None:
    """Ensure handdrawn.cfg exists with sane defaults."""

    directory = config_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    path = directory / CONFIG_FILENAME
    if path.exists():
        return

    try:
        path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        loaded = json.loads(config_file().read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(loaded, dict):
        return DEFAULT_CONFIG.copy()
    return loaded


def _stroke_width(value: Any) -> float:
    try:
        width = float(value)
    except (TypeError, ValueError):
        width = -1.0
    if not width > 0:
        warnings.warn(
            f"Ignoring stroke_width {value!r} in {config_file()}; using {defaults.STROKE_WIDTH}.",
            RuntimeWarning,
        )
        return defaults.STROKE_WIDTH
    return width


def get_stroke_defaults() -> StrokeDefaults:
    """Return the configured seed, segments, irregularity and stroke width."""

    raw_config = _load_user_config()
    seed = raw_config.get("seed", DEFAULT_CONFIG["seed"])
    segments = raw_config.get("segments", DEFAULT_CONFIG["segments"])
    irregularity = raw_config.get("irregularity", DEFAULT_CONFIG["irregularity"])
    try:
        seed, segments, irregularity = validate_generation(seed, segments, irregularity)
    except InvalidConfiguration as exc:
        warnings.warn(f"Ignoring generation settings in {config_file()}: {exc}", RuntimeWarning)
        seed, segments, irregularity = defaults.SEED, defaults.SEGMENTS, defaults.IRREGULARITY

    stroke_width = _stroke_width(raw_config.get("stroke_width", DEFAULT_CONFIG["stroke_width"]))
    return StrokeDefaults(seed=seed, segments=segments, irregularity=irregularity, stroke_width=stroke_width)
