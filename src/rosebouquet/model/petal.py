"""
Petal Outline
=============
The normalized petal shape shared by every rose.

The outline starts at the origin (the rose center), sweeps out along +y to
a rounded tip at about y=1 and comes back. Roses never copy it: they paint
it through the surface transform stack (translate, rotate, scale).
"""
from __future__ import annotations

from rosebouquet.model.geometry_primitives import Point, CubicBezier


PetalShape = tuple[CubicBezier, ...]

_PETAL_SHAPE: PetalShape = (
    CubicBezier(Point(0.0, 0.0), Point(-0.4, 0.1), Point(-0.6, 0.4), Point(-0.3, 0.8)),
    CubicBezier(Point(-0.3, 0.8), Point(-0.1, 1.1), Point(0.1, 1.1), Point(0.3, 0.8)),
    CubicBezier(Point(0.3, 0.8), Point(0.6, 0.4), Point(0.4, 0.1), Point(0.0, 0.0)),
)


def petal_shape() -> PetalShape:
    """Return the shared petal outline (always the same object)."""
    return _PETAL_SHAPE
