"""
Rose Entity
===========
One rose of the bouquet: its bloom timer, its post-bloom sway and the
painting of petals, center, stem and leaves.

Timing model
------------
Petal `i` starts growing `i * petal_delay` ms after the rose's first frame
and reaches full size `petal_duration` ms later. The rose is in full bloom
once the last petal window has passed, i.e. after
`petal_count * petal_delay + petal_duration` ms. From then on the whole
bloom sways on a sine wave.
"""
from __future__ import annotations

from dataclasses import dataclass, field, InitVar
import logging
import math
from typing import Iterator, Optional, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from rosebouquet import config
from rosebouquet.model.geometry_primitives import Point, CubicBezier
from rosebouquet.model.petal import petal_shape
from rosebouquet.model.surface import DrawingSurface, RadialGradient

if TYPE_CHECKING:
    from matplotlib.axes import Axes

logger = logging.getLogger(__name__)

Palette = tuple[str, str]  # (center colour, edge colour)


@dataclass(frozen=True)
class BloomTiming:
    petal_delay: float = config.PETAL_DELAY_MS  # ms between successive petal starts
    petal_duration: float = config.PETAL_DURATION_MS  # ms for one petal to open


@dataclass(frozen=True)
class SwayParams:
    amplitude: float = config.SWAY_AMPLITUDE_PX  # px
    frequency: float = config.SWAY_FREQUENCY  # rad/ms


@dataclass
class Rose:
    """
    A single procedurally generated rose.

    The stem runs from just below the bloom to the shared convergence point.
    Its two interior control points, like the sway phase, are drawn once
    from `rng` at construction and never regenerated.
    """
    x: float
    y: float
    size: float
    colors: Palette
    petal_count: int
    tilt_direction: float
    is_main: bool
    convergence_point: InitVar[Point]
    rng: InitVar[Optional[np.random.Generator]] = None
    timing: BloomTiming = field(default_factory=BloomTiming)
    sway: SwayParams = field(default_factory=SwayParams)

    initial_x: float = field(init=False)
    initial_y: float = field(init=False)
    phase: float = field(init=False)
    stem: CubicBezier = field(init=False)
    start_time: Optional[float] = field(init=False, default=None)
    full_bloom: bool = field(init=False, default=False)

    def __post_init__(self, convergence_point: Point, rng: Optional[np.random.Generator]) -> None:
        rng = rng if rng is not None else np.random.default_rng()
        self.initial_x = self.x
        self.initial_y = self.y
        self.phase = float(rng.uniform(0.0, 2.0 * math.pi))

        jitter = config.STEM_JITTER_PX
        p0 = Point(self.x, self.y + self.size * 0.5)
        p3 = Point(convergence_point.x, convergence_point.y)
        p1 = Point(self.x + float(rng.uniform(-jitter, jitter)), self.y + self.size * 1.2)
        p2 = Point(
            (self.x + p3.x) / 2 + float(rng.uniform(-jitter, jitter)),
            (self.y + p3.y) / 2,
        )
        self.stem = CubicBezier(p0, p1, p2, p3)

    # ------------------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------------------

    @property
    def bloom_end_time(self) -> float:
        """Elapsed ms at which the last petal finishes growing."""
        return self.petal_count * self.timing.petal_delay + self.timing.petal_duration

    def update(self, current_time: float) -> None:
        """Latch the start time on the first call and advance the bloom state."""
        if self.start_time is None:
            self.start_time = current_time
        if self.full_bloom:
            return
        if current_time - self.start_time > self.bloom_end_time:
            self.full_bloom = True
            logger.debug(f"Rose at ({self.x:.0f}, {self.y:.0f}) reached full bloom.")

    def elapsed(self, current_time: float) -> float:
        """Milliseconds since the first update(); 0 while the rose has not started."""
        if self.start_time is None:
            return 0.0
        return current_time - self.start_time

    def petal_growth(self, index: int, elapsed: float) -> float:
        """
        Growth of petal `index` in [0, 1].

        0 before the petal's turn, linear over `petal_duration`, 1 afterwards.
        A zero duration gives a step; 0/0 counts as not yet grown.
        """
        petal_elapsed = elapsed - index * self.timing.petal_delay
        duration = self.timing.petal_duration
        if duration == 0:
            return 1.0 if petal_elapsed > 0 else 0.0
        growth = petal_elapsed / duration
        if math.isnan(growth):
            return 0.0
        return min(max(growth, 0.0), 1.0)

    def visible_petals(self, elapsed: float) -> Iterator[tuple[int, float]]:
        """Yield (index, growth) for every petal that has started to open."""
        for i in range(self.petal_count):
            growth = self.petal_growth(i, elapsed)
            if growth > 0:
                yield i, growth

    def petal_angle(self, index: int) -> float:
        """Orientation of petal `index`: evenly spaced plus the rose's twist."""
        return index * 2.0 * math.pi / self.petal_count + self.tilt_direction * 0.1

    def sway_offset(self, current_time: float) -> tuple[float, float]:
        """
        Offset of the bloom origin; zero until the rose is in full bloom.
        A non-finite timestamp has no phase, so it does not sway either.
        """
        if not self.full_bloom or not math.isfinite(current_time):
            return 0.0, 0.0
        sway = math.sin(current_time * self.sway.frequency + self.phase) * self.sway.amplitude
        return sway * self.tilt_direction, sway * config.SWAY_VERTICAL_DAMPING

    # ------------------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------------------

    def draw(self, surface: DrawingSurface, current_time: float) -> None:
        """Paint the rose as it looks at `current_time`."""
        elapsed = self.elapsed(current_time)
        center_color, edge_color = self.colors
        dx, dy = self.sway_offset(current_time)

        surface.save()
        surface.translate(self.x + dx, self.y + dy)

        gradient = RadialGradient(
            inner_radius=0.1, outer_radius=0.5,
            inner_color=center_color, outer_color=edge_color,
        )
        shape = petal_shape()
        for i, growth in self.visible_petals(elapsed):
            surface.save()
            surface.rotate(self.petal_angle(i))
            petal_scale = self.size * 0.4 * growth
            surface.scale(petal_scale, petal_scale)
            surface.fill_path(shape, gradient)
            surface.stroke_path(shape, edge_color, 0.05)
            surface.restore()

        # center sits on top of the petals
        surface.fill_circle(0.0, 0.0, self.size * 0.1, edge_color)
        surface.restore()

        self.draw_stem_and_leaves(surface)

    def draw_stem_and_leaves(self, surface: DrawingSurface) -> None:
        """Stem curve in canvas coordinates plus two leaves across it."""
        surface.stroke_cubic(self.stem, config.STEM_COLOR, self.size * 0.08)

        for t in config.LEAF_POSITIONS:
            point = self.stem.point_at(t)
            angle = self.stem.tangent_angle(t)
            surface.save()
            surface.translate(point.x, point.y)
            surface.rotate(angle + math.pi / 2)
            surface.fill_ellipse(0.0, 0.0, self.size * 0.15, self.size * 0.06, config.LEAF_COLOR)
            surface.restore()

    # ------------------------------------------------------------------------------
    # Debug
    # ------------------------------------------------------------------------------

    def plot_bloom_schedule(self, ax: Optional[Axes] = None, show: bool = False) -> Axes:
        """
        Plot the growth of every petal over the bloom period.

        Args:
            ax: Axes to draw into; a new figure is created when omitted.
            show: Call plt.show() at the end.

        Returns:
            The axes with one line per petal.
        """
        end = self.bloom_end_time
        times = np.linspace(0.0, end * 1.1 if end > 0 else 1.0, 400)

        if ax is None:
            _, ax = plt.subplots(figsize=(7, 4))

        for i in range(self.petal_count):
            growth = [self.petal_growth(i, t) for t in times]
            ax.plot(times, growth, lw=1.5, label=f"petal {i}")

        ax.axvline(end, color="gray", linestyle="--", lw=1)
        ax.set_title(f"Bloom schedule ({self.petal_count} petals)")
        ax.set_xlabel("Elapsed time (ms)")
        ax.set_ylabel("Growth")
        ax.set_ylim(-0.05, 1.05)
        ax.grid(visible=True, which='major', linestyle=':', color='gray', lw=0.5)

        if show:
            plt.show()
        return ax
