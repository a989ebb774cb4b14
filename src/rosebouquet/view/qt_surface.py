"""
QPainter Drawing Surface
========================
Adapter that lets the model paint into any QPaintDevice (widget, QImage).
"""
from __future__ import annotations

from functools import lru_cache
import math
from typing import Sequence

from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QPainter, QPainterPath, QColor, QBrush, QPen, QRadialGradient

from rosebouquet.model.geometry_primitives import CubicBezier
from rosebouquet.model.surface import Fill, RadialGradient


@lru_cache(maxsize=64)
def _build_path(segments: tuple[CubicBezier, ...]) -> QPainterPath:
    """Convert connected cubic segments to a QPainterPath (cached, shapes are immutable)."""
    path = QPainterPath()
    if not segments:
        return path
    start = segments[0].p0
    path.moveTo(start.x, start.y)
    for seg in segments:
        path.cubicTo(seg.p1.x, seg.p1.y, seg.p2.x, seg.p2.y, seg.p3.x, seg.p3.y)
    return path


def _brush(fill: Fill) -> QBrush:
    if isinstance(fill, RadialGradient):
        # Outer circle is the gradient "center" circle, inner one the focal circle
        gradient = QRadialGradient(QPointF(0.0, 0.0), fill.outer_radius, QPointF(0.0, 0.0), fill.inner_radius)
        gradient.setColorAt(0.0, QColor(fill.inner_color))
        gradient.setColorAt(1.0, QColor(fill.outer_color))
        return QBrush(gradient)
    return QBrush(QColor(fill))


class QPainterSurface:
    """
    DrawingSurface backed by an active QPainter.

    The painter must already be begun on the target device; the surface does
    not end it.
    """
    def __init__(self, painter: QPainter, width: float, height: float) -> None:
        self.painter = painter
        self._width = float(width)
        self._height = float(height)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    # ---- transform stack ----

    def save(self) -> None:
        self.painter.save()

    def restore(self) -> None:
        self.painter.restore()

    def translate(self, dx: float, dy: float) -> None:
        self.painter.translate(dx, dy)

    def rotate(self, angle_rad: float) -> None:
        # QPainter rotates in degrees, clockwise on screen like canvas radians
        self.painter.rotate(math.degrees(angle_rad))

    def scale(self, sx: float, sy: float) -> None:
        self.painter.scale(sx, sy)

    # ---- primitives ----

    def clear(self) -> None:
        self.painter.save()
        self.painter.resetTransform()
        self.painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
        self.painter.fillRect(QRectF(0.0, 0.0, self._width, self._height), Qt.GlobalColor.transparent)
        self.painter.restore()

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self.painter.fillRect(QRectF(x, y, w, h), QColor(color))

    def fill_path(self, segments: Sequence[CubicBezier], fill: Fill) -> None:
        self.painter.fillPath(_build_path(tuple(segments)), _brush(fill))

    def stroke_path(self, segments: Sequence[CubicBezier], color: str, width: float) -> None:
        self.painter.strokePath(_build_path(tuple(segments)), QPen(QColor(color), width))

    def stroke_cubic(self, curve: CubicBezier, color: str, width: float) -> None:
        self.stroke_path((curve,), color, width)

    def fill_circle(self, cx: float, cy: float, r: float, color: str) -> None:
        self.fill_ellipse(cx, cy, r, r, color)

    def fill_ellipse(self, cx: float, cy: float, rx: float, ry: float, color: str) -> None:
        self.painter.save()
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(QColor(color))
        self.painter.drawEllipse(QPointF(cx, cy), rx, ry)
        self.painter.restore()
