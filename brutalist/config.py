"""Global configuration: constants, defaults, and environment settings."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)

# Default output directory for exported scenes
DEFAULT_OUTPUT_DIR = Path("output")

# Composition selection thresholds on the type roll
HYBRID_THRESHOLD = 0.3
WIDE_THRESHOLD = 0.5
BALANCED_THRESHOLD = 0.7

# Hybrid sub-assembly placement, relative to the requested cell size / height
HYBRID_WIDE_SHIFT = (-0.6, 0.0, 0.0)
HYBRID_WIDE_CELL = 0.8
HYBRID_WIDE_HEIGHT = 0.6
HYBRID_TALL_SHIFT = (0.4, 0.0, 0.3)
HYBRID_TALL_CELL = 0.6
HYBRID_TALL_HEIGHT = 1.5

# Living-space shell
WALL_THICKNESS = 0.4
SHELL_DEPTH_RATIO = 0.7

# Multi-story floor height
STOREY_HEIGHT = 3.0

# Principle-transform pass
ROUGHNESS_THRESHOLD = 0.3
HORIZONTAL_EMPHASIS_RANGE = (1.5, 2.5)
DEPTH_EMPHASIS = 1.2
RIGHT_ANGLE = math.pi / 2

# Disintegration runs on massing elements only above this complexity
DISINTEGRATION_COMPLEXITY = 0.5
DISINTEGRATION_INTENSITY = 0.6
DISINTEGRATION_NOISE_SCALE = 2.0
FRAGMENT_SIZE_RATIO = 0.2

# Parameter-entry controls: (min, max, step, default)
HEIGHT_CONTROL = (1.0, 10.0, 0.5, 4.0)
CELL_SIZE_CONTROL = (2.0, 12.0, 0.5, 6.0)
# Regeneration offset: (-cell_size, 0, -cell_size) times this, centring the cell
CONTROLS_CENTERING = 0.5

# Mesh emission
FALLBACK_COLOR = "#ff0000"
FALLBACK_SIZE = 1.0

# Known environment keys with defaults
_CONFIG_KEYS: dict[str, dict[str, str]] = {
    "BRUTALIST_ENV": {"default": "development", "description": "Environment profile"},
    "BRUTALIST_LOG_LEVEL": {"default": "INFO", "description": "Logging level"},
    "BRUTALIST_OUTPUT_DIR": {"default": str(DEFAULT_OUTPUT_DIR), "description": "Export directory"},
    "BRUTALIST_EXPORT_FORMAT": {"default": "json3d", "description": "Default export format"},
    "BRUTALIST_SEED": {"default": "", "description": "Fixed seed for every composition"},
}

_PROFILES: dict[str, dict[str, str]] = {
    "development": {"BRUTALIST_LOG_LEVEL": "DEBUG"},
    "production": {"BRUTALIST_LOG_LEVEL": "WARNING"},
    "testing": {"BRUTALIST_LOG_LEVEL": "DEBUG", "BRUTALIST_SEED": "0.42"},
}


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    env: str = "development"
    log_level: str = "INFO"
    output_dir: Path = DEFAULT_OUTPUT_DIR
    export_format: str = "json3d"
    seed: float | None = None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Merge defaults -> profile -> environment variables.

    Parameters
    ----------
    environ:
        Mapping to read from.  Defaults to ``os.environ``.
    """
    environ = os.environ if environ is None else environ

    values = {key: info["default"] for key, info in _CONFIG_KEYS.items()}
    env_name = environ.get("BRUTALIST_ENV", values["BRUTALIST_ENV"])
    values["BRUTALIST_ENV"] = env_name
    values.update(_PROFILES.get(env_name, {}))

    for key in _CONFIG_KEYS:
        env_val = environ.get(key)
        if env_val is not None:
            values[key] = env_val

    seed: float | None = None
    raw_seed = values["BRUTALIST_SEED"].strip()
    if raw_seed:
        try:
            seed = float(raw_seed)
        except ValueError:
            logger.warning("Ignoring non-numeric BRUTALIST_SEED=%r", raw_seed)

    return Settings(
        env=env_name,
        log_level=values["BRUTALIST_LOG_LEVEL"].upper(),
        output_dir=Path(values["BRUTALIST_OUTPUT_DIR"]),
        export_format=values["BRUTALIST_EXPORT_FORMAT"],
        seed=seed,
    )
