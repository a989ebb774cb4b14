"""
Animation Driver
================
Owns the current bouquet and turns Qt timer ticks into frames.

Why is this file needed?
------------------------
1. Timing: A QTimer schedules frames (about 60 per second) and a monotonic
   QElapsedTimer provides the millisecond timestamps the roses expect.
2. Signals: The canvas only listens to `frame_requested` and calls
   `paint()`; it never sees the bouquet directly.

Classes:
    AnimationController: start/stop the frame drive, paint a frame.

Functions:
    render_frame: Clear the surface and paint one frame of a bouquet.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from PySide6.QtCore import QObject, QTimer, QElapsedTimer, Signal

from rosebouquet import config
from rosebouquet.model.bouquet import Bouquet, create_bouquet
from rosebouquet.model.surface import DrawingSurface

logger = logging.getLogger(__name__)


def render_frame(surface: DrawingSurface, bouquet: Optional[Bouquet], now: float) -> None:
    """
    Paint one frame: background, then update() and draw() for every rose.
    """
    surface.clear()
    surface.fill_rect(0.0, 0.0, surface.width, surface.height, config.BACKGROUND_COLOR)
    if bouquet is None:
        return
    bouquet.step(surface, now)


class AnimationController(QObject):
    # Emitted on every timer tick; the canvas repaints in response
    frame_requested = Signal()
    # Emitted once per bouquet, when the last rose has bloomed
    bloom_completed = Signal()

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        parent: Optional[QObject] = None
    ) -> None:
        super().__init__(parent)
        self.rng: np.random.Generator = rng if rng is not None else np.random.default_rng(config.RANDOM_SEED)
        self.bouquet: Optional[Bouquet] = None
        self._bloom_reported: bool = False

        self._clock = QElapsedTimer()

        self._timer = QTimer(self)
        self._timer.setInterval(config.FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._on_tick)

    # --- PROPERTIES ---

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    # --- PUBLIC API ---

    def start(self, width: float, height: float) -> Bouquet:
        """Build a fresh bouquet for the canvas size and begin the frame drive."""
        self.bouquet = create_bouquet(width, height, rng=self.rng)
        self._bloom_reported = False
        self._clock.start()
        self._timer.start()
        logger.info(f"Animation started ({config.FRAME_INTERVAL_MS} ms frame interval).")
        return self.bouquet

    def stop(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
            logger.info("Animation stopped.")

    def now(self) -> float:
        """Milliseconds since start(); 0 before the first start."""
        if not self._clock.isValid():
            return 0.0
        return float(self._clock.elapsed())

    def paint(self, surface: DrawingSurface, now: Optional[float] = None) -> None:
        """Render the current bouquet at `now` (defaults to the clock)."""
        render_frame(surface, self.bouquet, self.now() if now is None else now)
        self._check_bloom_completed()

    # --- SLOTS ---

    def _on_tick(self) -> None:
        self.frame_requested.emit()

    def _check_bloom_completed(self) -> None:
        if self._bloom_reported or self.bouquet is None:
            return
        if self.bouquet.is_fully_bloomed:
            self._bloom_reported = True
            logger.info("All roses are in full bloom.")
            self.bloom_completed.emit()
