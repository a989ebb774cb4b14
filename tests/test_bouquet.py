"""Tests for the bouquet layout."""
import math

import numpy as np
import pytest

from rosebouquet import config
from rosebouquet.model.bouquet import Bouquet, create_bouquet


def layout_signature(bouquet: Bouquet):
    return [
        (round(r.x, 9), round(r.y, 9), r.size, r.petal_count, r.tilt_direction, r.colors, r.is_main)
        for r in bouquet.roses
    ]


class TestCreateBouquet:
    def test_six_roses_three_main(self, rng):
        bouquet = create_bouquet(1000, 600, rng=rng)
        assert len(bouquet) == 6
        assert len(bouquet.main_roses) == 3
        assert len(bouquet.secondary_roses) == 3
        assert all(r.size == 80 and r.petal_count == 8 for r in bouquet.main_roses)
        assert all(r.size == 50 and r.petal_count == 6 for r in bouquet.secondary_roses)

    def test_geometry(self, rng):
        bouquet = create_bouquet(1000, 600, rng=rng)
        assert (bouquet.center.x, bouquet.center.y) == (500.0, 300.0)
        assert bouquet.radius == 150.0

        first = bouquet.roses[0]
        assert first.x == pytest.approx(500.0)
        assert first.y == pytest.approx(150.0)

        for i, rose in enumerate(bouquet.main_roses):
            angle = i * 2 * math.pi / 3 - math.pi / 2
            assert rose.x == pytest.approx(500 + 150 * math.cos(angle))
            assert rose.y == pytest.approx(300 + 150 * math.sin(angle))

        for i, rose in enumerate(bouquet.secondary_roses):
            angle = i * 2 * math.pi / 3 - math.pi / 2 + math.pi / 6
            assert rose.x == pytest.approx(500 + 180 * math.cos(angle))
            assert rose.y == pytest.approx(300 + 180 * math.sin(angle))

    def test_tilt_and_palettes(self, rng):
        bouquet = create_bouquet(1000, 600, rng=rng)
        assert [r.tilt_direction for r in bouquet.main_roses] == [1.0, -1.0, 1.0]
        assert [r.tilt_direction for r in bouquet.secondary_roses] == [0.5, -0.5, 0.5]
        assert [r.colors for r in bouquet.main_roses] == list(config.MAIN_COLORS)
        assert [r.colors for r in bouquet.secondary_roses] == list(config.MAIN_COLORS)

    def test_shared_convergence_point(self, rng):
        bouquet = create_bouquet(1000, 600, rng=rng)
        assert (bouquet.convergence_point.x, bouquet.convergence_point.y) == (500.0, 650.0)
        assert all(r.stem.p3 == bouquet.convergence_point for r in bouquet.roses)

    def test_radius_uses_shorter_side(self, rng):
        bouquet = create_bouquet(400, 900, rng=rng)
        assert bouquet.radius == 100.0
        assert bouquet.convergence_point.y == 950.0

    def test_layout_is_deterministic(self):
        a = create_bouquet(1000, 600, rng=np.random.default_rng(1))
        b = create_bouquet(1000, 600, rng=np.random.default_rng(2))
        assert layout_signature(a) == layout_signature(b)
        # only the randomized stem interior differs
        assert [r.stem.p1 for r in a.roses] != [r.stem.p1 for r in b.roses]
        assert [r.stem.p0 for r in a.roses] == [r.stem.p0 for r in b.roses]

    def test_same_seed_same_stems(self):
        a = create_bouquet(1000, 600, rng=np.random.default_rng(5))
        b = create_bouquet(1000, 600, rng=np.random.default_rng(5))
        assert [r.stem for r in a.roses] == [r.stem for r in b.roses]

    def test_rebuild_returns_fresh_roses(self, rng, surface):
        a = create_bouquet(1000, 600, rng=rng)
        a.step(surface, 0.0)
        b = create_bouquet(1000, 600, rng=rng)
        assert all(r.start_time is None for r in b.roses)
        assert not set(map(id, a.roses)) & set(map(id, b.roses))

    def test_default_rng(self):
        bouquet = create_bouquet(800, 500)
        assert len(bouquet) == 6


class TestBouquetDrive:
    def test_step_updates_and_draws_every_rose(self, rng, surface):
        bouquet = create_bouquet(1000, 600, rng=rng)
        bouquet.step(surface, 0.0)
        assert all(r.start_time == 0.0 for r in bouquet.roses)
        assert len(surface.named("stroke_cubic")) == 6
        assert len(surface.named("fill_circle")) == 6
        assert surface.depth == 0

    def test_step_updates_each_rose_before_drawing_it(self, rng, surface):
        bouquet = create_bouquet(1000, 600, rng=rng)
        log = []
        for i, rose in enumerate(bouquet.roses):
            update, draw = rose.update, rose.draw
            rose.update = lambda t, i=i, f=update: (log.append(("update", i)), f(t))
            rose.draw = lambda s, t, i=i, f=draw: (log.append(("draw", i)), f(s, t))
        bouquet.step(surface, 0.0)
        expected = [(name, i) for i in range(len(bouquet)) for name in ("update", "draw")]
        assert log == expected

    def test_is_fully_bloomed(self, rng, surface):
        bouquet = create_bouquet(1000, 600, rng=rng)
        bouquet.step(surface, 0.0)
        # secondary roses finish first (6 petals), main ones at 2900 ms
        bouquet.step(surface, 2400.0)
        assert all(r.full_bloom for r in bouquet.secondary_roses)
        assert not bouquet.is_fully_bloomed
        bouquet.step(surface, 3000.0)
        assert bouquet.is_fully_bloomed

    def test_roses_are_independent(self, rng):
        bouquet = create_bouquet(1000, 600, rng=rng)
        bouquet.roses[0].update(100.0)
        assert all(r.start_time is None for r in bouquet.roses[1:])
