"""Shared fixtures: a recording drawing surface and a headless Qt application."""
import os

# Must be set before any Qt / pyplot import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest

from rosebouquet.model.geometry_primitives import Point


class RecordingSurface:
    """DrawingSurface that records every call as (name, args)."""

    def __init__(self, width: float = 1000.0, height: float = 600.0) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple[str, tuple]] = []
        self.depth = 0
        self.max_depth = 0

    def _record(self, name, *args):
        self.calls.append((name, args))

    def save(self):
        self.depth += 1
        self.max_depth = max(self.max_depth, self.depth)
        self._record("save")

    def restore(self):
        self.depth -= 1
        self._record("restore")

    def translate(self, dx, dy):
        self._record("translate", dx, dy)

    def rotate(self, angle_rad):
        self._record("rotate", angle_rad)

    def scale(self, sx, sy):
        self._record("scale", sx, sy)

    def clear(self):
        self._record("clear")

    def fill_rect(self, x, y, w, h, color):
        self._record("fill_rect", x, y, w, h, color)

    def fill_path(self, segments, fill):
        self._record("fill_path", segments, fill)

    def stroke_path(self, segments, color, width):
        self._record("stroke_path", segments, color, width)

    def stroke_cubic(self, curve, color, width):
        self._record("stroke_cubic", curve, color, width)

    def fill_circle(self, cx, cy, r, color):
        self._record("fill_circle", cx, cy, r, color)

    def fill_ellipse(self, cx, cy, rx, ry, color):
        self._record("fill_ellipse", cx, cy, rx, ry, color)

    def named(self, name: str) -> list[tuple]:
        return [args for call, args in self.calls if call == name]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def convergence() -> Point:
    return Point(500.0, 650.0)


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
