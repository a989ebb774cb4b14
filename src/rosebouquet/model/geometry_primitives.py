"""
Geometric Primitives for the rose geometry.

Points and cubic Bézier segments, together with the curve math that
evaluates them (position, tangent, polyline sampling).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A point (or a free vector) in the 2D canvas plane. Y grows downwards."""
    x: float
    y: float

    @property
    def angle(self) -> float:
        """Direction of the vector from the +x axis in radians."""
        return math.atan2(self.y, self.x)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])

    @classmethod
    def polar(cls, center: Point, radius: float, angle_rad: float) -> Point:
        """Point at `radius` from `center` in direction `angle_rad`."""
        return cls(center.x + radius * math.cos(angle_rad), center.y + radius * math.sin(angle_rad))


def cubic_bezier_point(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    """
    Evaluate a cubic Bézier curve at parameter t.

    Args:
        t: Curve parameter. The curve runs from p0 (t=0) to p3 (t=1); values
           outside [0, 1] extrapolate the same polynomial.
        p0: Start point.
        p1: First interior control point.
        p2: Second interior control point.
        p3: End point.

    Returns:
        The point on the curve.
    """
    u = 1.0 - t
    uu = u * u
    tt = t * t
    b0 = uu * u
    b1 = 3.0 * uu * t
    b2 = 3.0 * u * tt
    b3 = tt * t
    return Point(
        b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x,
        b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y,
    )


def cubic_bezier_tangent(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    """
    Derivative of a cubic Bézier curve at parameter t.

    The vector is not normalized; only its direction is meaningful.

    Notes:
        B'(t) = 3(1-t)^2 (p1 - p0) + 6(1-t)t (p2 - p1) + 3t^2 (p3 - p2)
    """
    u = 1.0 - t
    d0 = 3.0 * u * u
    d1 = 6.0 * u * t
    d2 = 3.0 * t * t
    return Point(
        d0 * (p1.x - p0.x) + d1 * (p2.x - p1.x) + d2 * (p3.x - p2.x),
        d0 * (p1.y - p0.y) + d1 * (p2.y - p1.y) + d2 * (p3.y - p2.y),
    )


def sample_cubic_bezier(
    p0: Point,
    p1: Point,
    p2: Point,
    p3: Point,
    n_points: int = 50
) -> npt.NDArray[np.float64]:
    """
    Discretize a cubic Bézier curve into an (N, 2) polyline.

    Args:
        p0, p1, p2, p3: Control points.
        n_points: Number of samples, both endpoints included.

    Returns:
        An array of shape (n_points, 2) with the (x, y) samples.
    """
    t = np.linspace(0.0, 1.0, max(2, n_points))[:, None]
    u = 1.0 - t
    ctrl = np.array([p0.to_array(), p1.to_array(), p2.to_array(), p3.to_array()])
    return (
        (u ** 3) * ctrl[0]
        + 3.0 * (u ** 2) * t * ctrl[1]
        + 3.0 * u * (t ** 2) * ctrl[2]
        + (t ** 3) * ctrl[3]
    )


@dataclass(frozen=True)
class CubicBezier:
    """
    A cubic Bézier segment from `p0` to `p3` with interior control points
    `p1` and `p2`.
    """
    p0: Point
    p1: Point
    p2: Point
    p3: Point

    @property
    def control_points(self) -> tuple[Point, Point, Point, Point]:
        return self.p0, self.p1, self.p2, self.p3

    def point_at(self, t: float) -> Point:
        return cubic_bezier_point(t, *self.control_points)

    def tangent_at(self, t: float) -> Point:
        return cubic_bezier_tangent(t, *self.control_points)

    def tangent_angle(self, t: float) -> float:
        """Orientation of the curve at t in radians, atan2(dy, dx)."""
        return self.tangent_at(t).angle

    def sample(self, n_points: int = 50) -> npt.NDArray[np.float64]:
        """Discretize the segment into an (n_points, 2) polyline."""
        return sample_cubic_bezier(*self.control_points, n_points=n_points)
