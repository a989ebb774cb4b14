"""
Configuration & Global Constants
================================
This module serves as the central registry for colours, timings and canvas
limits used across the application.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (colours, milliseconds, pixels)
   scattered throughout the model and the view.
2. Reproducibility: The random seed and the log level can be set from the
   environment without touching the code.

Exports:
    MAIN_COLORS (tuple): The three [center, edge] palettes of the bouquet.
    RANDOM_SEED (int | None): Seed for the stem/phase generator.
    LOG_LEVEL (int): Level passed to setup_logging().
"""
import logging
import os
from typing import Optional


def _env_int(name: str) -> Optional[int]:
    """Read an optional integer from the environment."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        print(f"WARNING: Ignoring non-integer {name}={raw!r}")
        return None


def _env_log_level(name: str, default: int = logging.INFO) -> int:
    """Read a logging level name (DEBUG, INFO, ...) from the environment."""
    raw = os.environ.get(name)
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


# Canvas (dimension lookup only, there is no responsive layout)
CANVAS_MAX_WIDTH: int = 1000
CANVAS_MAX_HEIGHT: int = 600
CANVAS_WIDTH_FRACTION: float = 0.9
CANVAS_HEIGHT_FRACTION: float = 0.7

# Colours
BACKGROUND_COLOR: str = "#ffe6f0"
STEM_COLOR: str = "#2E8B57"  # sea green
LEAF_COLOR: str = "#228B22"  # forest green
MAIN_COLORS: tuple[tuple[str, str], ...] = (
    ("#ffcccc", "#ff3366"),  # pink / red
    ("#ffffff", "#ff99b3"),  # white with pink edge
    ("#ffffcc", "#ffcc00"),  # pale yellow / gold
)

# Bloom timing [ms]
PETAL_DELAY_MS: float = 300.0
PETAL_DURATION_MS: float = 500.0

# Sway after full bloom
SWAY_AMPLITUDE_PX: float = 10.0
SWAY_FREQUENCY: float = 0.002  # rad/ms
SWAY_VERTICAL_DAMPING: float = 0.3

# Layout
MAIN_ROSE_SIZE: float = 80.0
MAIN_PETAL_COUNT: int = 8
SECONDARY_ROSE_SIZE: float = 50.0
SECONDARY_PETAL_COUNT: int = 6
SECONDARY_RADIUS_FACTOR: float = 1.2
CONVERGENCE_OFFSET_PX: float = 50.0  # stems meet this far below the canvas
STEM_JITTER_PX: float = 20.0
LEAF_POSITIONS: tuple[float, ...] = (0.4, 0.7)

# Animation driver
FRAME_INTERVAL_MS: int = 16
INTRO_FADE_MS: int = 500

# Environment overrides
RANDOM_SEED: Optional[int] = _env_int("ROSEBOUQUET_SEED")
LOG_LEVEL: int = _env_log_level("ROSEBOUQUET_LOG_LEVEL")
