"""
Drawing Surface Protocol
========================
The paint capability that roses draw into.

Why is this file needed?
------------------------
The model must stay free of Qt. Every `draw()` call receives an object that
satisfies `DrawingSurface`; the view provides one backed by QPainter and the
tests provide one that just records the calls.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union, Sequence, runtime_checkable

from rosebouquet.model.geometry_primitives import CubicBezier


@dataclass(frozen=True)
class RadialGradient:
    """Two-stop radial gradient centred at the local origin."""
    inner_radius: float
    outer_radius: float
    inner_color: str
    outer_color: str


Fill = Union[str, RadialGradient]


@runtime_checkable
class DrawingSurface(Protocol):
    """2D paint context with an affine transform stack."""

    @property
    def width(self) -> float: ...

    @property
    def height(self) -> float: ...

    # ---- transform stack ----
    def save(self) -> None: ...
    def restore(self) -> None: ...
    def translate(self, dx: float, dy: float) -> None: ...
    def rotate(self, angle_rad: float) -> None: ...
    def scale(self, sx: float, sy: float) -> None: ...

    # ---- primitives ----
    def clear(self) -> None: ...
    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None: ...
    def fill_path(self, segments: Sequence[CubicBezier], fill: Fill) -> None: ...
    def stroke_path(self, segments: Sequence[CubicBezier], color: str, width: float) -> None: ...
    def stroke_cubic(self, curve: CubicBezier, color: str, width: float) -> None: ...
    def fill_circle(self, cx: float, cy: float, r: float, color: str) -> None: ...
    def fill_ellipse(self, cx: float, cy: float, rx: float, ry: float, color: str) -> None: ...
