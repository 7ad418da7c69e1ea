"""
test_composite_shapes.py
------------------------
Unit tests for flower.py, spirograph.py, checkerboard.py, and color_cycling.py
"""

import math
import numpy as np
import pytest

from shapepaths.config import ShapeConfig
from shapepaths.errors import DegenerateGeometryError, RangeViolation
from shapepaths.geometry import Point, Rect
from shapepaths.path import AppendSubpath, ArcTo, LineTo, MoveTo
from shapepaths.shapes import (
    Checkerboard, ColorCyclingCircle, ColorCyclingRectangle, Flower, Spirograph,
    gcd, ring_hue,
)


# ---------------------------------------------------------------------------
# Flower
# ---------------------------------------------------------------------------

def test_flower_has_sixteen_petals(square):
    path = Flower().path(square)
    assert len(path) == 16
    assert all(isinstance(c, AppendSubpath) for c in path)
    assert len(path.subpaths()) == 16


def test_flower_first_petal_is_unrotated(square):
    petal = Flower().path(square).commands[0].path
    pts = petal.points()
    xs, ys = [p.x for p in pts], [p.y for p in pts]
    # ellipse in Rect(-20, 0, 100, 200), moved to the center (200, 200)
    assert min(xs) == pytest.approx(180) and max(xs) == pytest.approx(280)
    assert min(ys) == pytest.approx(200) and max(ys) == pytest.approx(400)


def test_flower_petals_spin_in_place(square):
    # rotating before translating keeps every petal around the center
    for p in Flower().path(square).points():
        assert math.hypot(p.x - 200, p.y - 200) < 210


def test_flower_petal_parameters(square):
    petal = Flower(petal_offset=0, petal_width=50).path(square).commands[0].path
    xs = [p.x for p in petal.points()]
    assert min(xs) == pytest.approx(200) and max(xs) == pytest.approx(250)


def test_flower_petal_step_from_config():
    flower = Flower(config=ShapeConfig(flower_petal_step=math.pi / 4))
    assert len(flower.petal_angles()) == 8
    assert Flower().petal_angles()[-1] == pytest.approx(15 * math.pi / 8)


# ---------------------------------------------------------------------------
# Spirograph
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("a, b, expected", [
    (100, 50, 50),
    (12, 18, 6),
    (7, 13, 1),
    (0, 9, 9),
    (0, 0, 0),
    (21.9, 14.2, 7),
])
def test_gcd(a, b, expected):
    assert gcd(a, b) == expected


def test_spirograph_end_theta():
    spiro = Spirograph(inner_radius=100, outer_radius=50, distance=25, amount=1.0)
    assert spiro.end_theta() == 7
    assert Spirograph(100, 50, 25, 0.5).end_theta() == pytest.approx(3.5)


def test_spirograph_end_theta_zero_radii():
    with pytest.raises(DegenerateGeometryError):
        Spirograph(0, 0, 25, 1.0).end_theta()


def test_spirograph_zero_radii_gives_empty_path(square):
    assert not Spirograph(inner_radius=0, outer_radius=0).path(square)


def test_spirograph_commands(square):
    path = Spirograph(inner_radius=100, outer_radius=50, distance=25, amount=1.0).path(square)
    assert len(path) == 701
    assert isinstance(path.commands[0], MoveTo)
    assert all(isinstance(c, LineTo) for c in path.commands[1:])
    # theta = 0: (difference + distance, 0) recentered
    assert path.commands[0].point == Point(275, 200)


def test_spirograph_points_follow_hypotrochoid(square):
    path = Spirograph(inner_radius=120, outer_radius=45, distance=30, amount=0.25).path(square)
    k = 123
    theta = k * 0.01
    diff = 120 - 45
    x = diff * math.cos(theta) + 30 * math.cos(diff / 45 * theta) + 200
    y = diff * math.sin(theta) - 30 * math.sin(diff / 45 * theta) + 200
    assert path.commands[k].point == pytest.approx(Point(x, y))


def test_spirograph_zero_amount_is_single_point(square):
    path = Spirograph(amount=0.0).path(square)
    assert len(path) == 1
    assert isinstance(path.commands[0], MoveTo)


def test_spirograph_negative_amount_is_empty(square):
    assert not Spirograph(amount=-0.5).path(square)


def test_spirograph_nan_amount_is_empty(square):
    assert not Spirograph(amount=math.nan).path(square)


def test_spirograph_radius_ceiling(square):
    with pytest.raises(RangeViolation):
        Spirograph(inner_radius=250, outer_radius=75).path(square)
    relaxed = Spirograph(inner_radius=250, outer_radius=75, amount=0.1,
                         config=ShapeConfig(max_spirograph_radius=300))
    assert relaxed.path(square)


@pytest.mark.benchmark
def test_spirograph_perf_benchmark(benchmark, square):
    spiro = Spirograph(inner_radius=149, outer_radius=150, distance=100, amount=0.05)
    path = benchmark(lambda: spiro.path(square))
    assert path


# ---------------------------------------------------------------------------
# Checkerboard
# ---------------------------------------------------------------------------

def test_checkerboard_cell_count(square):
    path = Checkerboard(rows=4, columns=4).path(square)
    assert len(path) == 8
    assert all(isinstance(c, AppendSubpath) for c in path)


def test_checkerboard_odd_grid(square):
    # (row + column) even: 2 + 1 + 2 cells on 3x3, 3 + 2 on 2x5
    assert len(Checkerboard(rows=3, columns=3).path(square)) == 5
    assert len(Checkerboard(rows=2, columns=5).path(square)) == 5


def test_checkerboard_cell_geometry(square):
    cells = Checkerboard(rows=4, columns=8).path(square).commands
    assert cells[0].path.points() == [
        Point(0, 0), Point(50, 0), Point(50, 100), Point(0, 100), Point(0, 0),
    ]
    # second cell skips column 1
    assert cells[1].path.points()[0] == Point(100, 0)


def test_checkerboard_uses_rect_origin(offset_rect):
    first = Checkerboard(rows=2, columns=2).path(offset_rect).commands[0].path
    assert first.points()[0] == Point(50, 30)


@pytest.mark.parametrize("rows, columns", [(0, 4), (4, 0), (-2, 3)])
def test_checkerboard_empty_grid(square, rows, columns):
    assert not Checkerboard(rows=rows, columns=columns).path(square)


def test_checkerboard_vector_round_trip():
    board = Checkerboard().from_vector((8.0, 16.0))
    assert (board.rows, board.columns) == (8, 16)
    assert isinstance(board.rows, int)


def test_checkerboard_vector_truncates():
    board = Checkerboard().from_vector([8.7, 16.2])
    assert (board.rows, board.columns) == (8, 16)


def test_checkerboard_to_vector():
    assert Checkerboard(rows=3, columns=5).to_vector() == pytest.approx(np.array([3.0, 5.0]))


# ---------------------------------------------------------------------------
# Color cycling rings
# ---------------------------------------------------------------------------

def test_ring_hue_wraps():
    assert ring_hue(50, 100, 0.8) == pytest.approx(0.3)
    assert ring_hue(10, 100, 0.2) == pytest.approx(0.3)
    assert ring_hue(0, 100, 1.0) == pytest.approx(1.0)


def test_rings_count_and_order(square):
    rings = list(ColorCyclingCircle(amount=0.0, steps=10).rings(square))
    assert [r.index for r in rings] == list(range(10))


def test_ring_colors(square):
    first = next(ColorCyclingCircle(amount=0.0, steps=4).rings(square))
    full, half = first.colors
    assert full == pytest.approx((1.0, 0.0, 0.0))
    assert half == pytest.approx((0.5, 0.0, 0.0))


def test_ring_hue_matches_index(square):
    rings = list(ColorCyclingRectangle(amount=0.8, steps=100).rings(square))
    assert rings[50].hue == pytest.approx(0.3)


def test_circle_rings_are_inset(square):
    rings = list(ColorCyclingCircle(steps=5).rings(square))
    radii = [next(c for c in r.path if isinstance(c, ArcTo)).radius for r in rings]
    assert radii == [200, 199, 198, 197, 196]


def test_rectangle_rings_are_inset(square):
    rings = list(ColorCyclingRectangle(steps=3).rings(square))
    assert [r.path.points()[0] for r in rings] == [Point(0, 0), Point(1, 1), Point(2, 2)]


def test_color_cycling_path_appends_every_ring(square):
    path = ColorCyclingCircle(steps=7).path(square)
    assert len(path) == 7


def test_negative_steps_clamp_to_empty(square):
    shape = ColorCyclingCircle(steps=-3)
    assert list(shape.rings(square)) == []
    assert not shape.path(square)


def test_gradient_kind():
    assert ColorCyclingCircle.gradient == "radial"
    assert ColorCyclingRectangle.gradient == "linear"
