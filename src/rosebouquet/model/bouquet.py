"""
Bouquet Layout
==============
Places the fixed arrangement of roses around the canvas center.

Classes:
    Bouquet: The explicit value handed to the frame driver.

Functions:
    create_bouquet: Build a fresh bouquet for the given canvas size.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Iterator, Optional

import numpy as np

from rosebouquet import config
from rosebouquet.model.geometry_primitives import Point
from rosebouquet.model.rose import Rose
from rosebouquet.model.surface import DrawingSurface

logger = logging.getLogger(__name__)

RING_SIZE = 3


@dataclass
class Bouquet:
    """
    An ordered set of roses sharing one convergence point.
    Roses never touch each other's state; the bouquet only iterates them.
    """
    width: float
    height: float
    center: Point
    radius: float
    convergence_point: Point
    roses: list[Rose] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.roses)

    def __iter__(self) -> Iterator[Rose]:
        return iter(self.roses)

    @property
    def main_roses(self) -> list[Rose]:
        return [rose for rose in self.roses if rose.is_main]

    @property
    def secondary_roses(self) -> list[Rose]:
        return [rose for rose in self.roses if not rose.is_main]

    @property
    def is_fully_bloomed(self) -> bool:
        return bool(self.roses) and all(rose.full_bloom for rose in self.roses)

    def step(self, surface: DrawingSurface, current_time: float) -> None:
        """Advance and paint every rose, one rose at a time (update, then draw)."""
        for rose in self.roses:
            rose.update(current_time)
            rose.draw(surface, current_time)


def create_bouquet(
    width: float,
    height: float,
    rng: Optional[np.random.Generator] = None
) -> Bouquet:
    """
    Build a new bouquet for a canvas of the given size.

    Three main roses sit on a ring of radius min(width, height)/4, the first
    straight above the center and the others every 120°. Three smaller roses
    sit on a ring 1.2 times larger, rotated by 30°. All stems end at the
    horizontal center, just below the canvas.

    Args:
        width: Canvas width in px.
        height: Canvas height in px.
        rng: Source for stem curvature and sway phase. Defaults to a
             generator seeded from config.RANDOM_SEED.

    Returns:
        The new Bouquet (3 main + 3 secondary roses).
    """
    if rng is None:
        rng = np.random.default_rng(config.RANDOM_SEED)

    center = Point(width / 2, height / 2)
    radius = min(width, height) / 4
    convergence = Point(width / 2, height + config.CONVERGENCE_OFFSET_PX)

    bouquet = Bouquet(
        width=width,
        height=height,
        center=center,
        radius=radius,
        convergence_point=convergence,
    )

    for i in range(RING_SIZE):
        angle = i * 2 * math.pi / RING_SIZE - math.pi / 2
        position = Point.polar(center, radius, angle)
        bouquet.roses.append(Rose(
            x=position.x,
            y=position.y,
            size=config.MAIN_ROSE_SIZE,
            colors=config.MAIN_COLORS[i],
            petal_count=config.MAIN_PETAL_COUNT,
            tilt_direction=1.0 if i % 2 == 0 else -1.0,
            is_main=True,
            convergence_point=convergence,
            rng=rng,
        ))

    for i in range(RING_SIZE):
        angle = i * 2 * math.pi / RING_SIZE - math.pi / 2 + math.pi / 6
        position = Point.polar(center, radius * config.SECONDARY_RADIUS_FACTOR, angle)
        bouquet.roses.append(Rose(
            x=position.x,
            y=position.y,
            size=config.SECONDARY_ROSE_SIZE,
            colors=config.MAIN_COLORS[i % len(config.MAIN_COLORS)],
            petal_count=config.SECONDARY_PETAL_COUNT,
            tilt_direction=0.5 if i % 2 == 0 else -0.5,
            is_main=False,
            convergence_point=convergence,
            rng=rng,
        ))

    logger.info(
        f"Bouquet created: {len(bouquet)} roses on a {width:.0f}x{height:.0f} canvas, "
        f"stems converge at ({convergence.x:.0f}, {convergence.y:.0f})."
    )
    return bouquet
