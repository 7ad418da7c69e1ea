"""
basic.py
--------

Closed-form outline shapes: triangle, arc, circle, rectangle, trapezoid,
arrow, plus the ``ellipse_path`` / ``rectangle_path`` helpers used by the
composite shapes.

Every closed silhouette repeats its starting point as the final ``LineTo``.
"""

from __future__ import annotations

__all__ = [
    "Triangle", "Arc", "Circle", "Rectangle", "Trapezoid", "Arrow",
    "ellipse_path", "rectangle_path",
]

import math
from dataclasses import dataclass

from matplotlib.path import Path as mplPath
from matplotlib.transforms import Affine2D

from shapepaths.geometry import Angle, Point, Rect
from shapepaths.path import PathBuilder, ShapePath
from shapepaths.shapes.base import Animatable, InsettableShape, Shape

# "0 = up" callers vs. "0 = +X" arcs
QUARTER_TURN = Angle.from_degrees(90)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def ellipse_path(rect: Rect) -> ShapePath:
    """Ellipse inscribed in ``rect`` as a closed chain of cubic Bezier segments."""
    trans = (
        Affine2D()
        .scale(rect.width / 2, rect.height / 2)
        .translate(rect.mid_x, rect.mid_y)
    )
    return ShapePath.from_mpl(trans.transform_path(mplPath.unit_circle()))


def rectangle_path(rect: Rect) -> ShapePath:
    """Axis-aligned rectangle, clockwise on screen from the top-left corner."""
    return (
        PathBuilder()
        .move_to(Point(rect.min_x, rect.min_y))
        .line_to(Point(rect.max_x, rect.min_y))
        .line_to(Point(rect.max_x, rect.max_y))
        .line_to(Point(rect.min_x, rect.max_y))
        .line_to(Point(rect.min_x, rect.min_y))
        .build()
    )


# ---------------------------------------------------------------------------
# Triangle
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Triangle(Shape):
    """Top-middle, bottom-left, bottom-right, and back to the top."""

    def make_path(self, rect: Rect) -> ShapePath:
        top = Point(rect.mid_x, rect.min_y)
        return (
            PathBuilder()
            .move_to(top)
            .line_to(Point(rect.min_x, rect.max_y))
            .line_to(Point(rect.max_x, rect.max_y))
            .line_to(top)
            .build()
        )


# ---------------------------------------------------------------------------
# Arc
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Arc(InsettableShape, Animatable):
    """Circular arc with screen-friendly angles.

    Angles are in degrees with 0 pointing up, and ``clockwise`` means clockwise
    as seen on a Y-down screen. The raw arc subtracts a quarter turn from both
    angles and inverts the direction flag.

    Args:
        start_angle: Start angle in degrees.
        end_angle: End angle in degrees.
        clockwise: Visual sweep direction.
        inset_amount: Radius reduction, additive through ``with_inset()``.
    """
    start_angle: float = 0.0
    end_angle: float = 90.0
    clockwise: bool = True
    inset_amount: float = 0.0

    animatable_fields = ("start_angle", "end_angle", "inset_amount")

    def make_path(self, rect: Rect) -> ShapePath:
        start = Angle.from_degrees(self.start_angle) - QUARTER_TURN
        end = Angle.from_degrees(self.end_angle) - QUARTER_TURN
        center = rect.center
        radius = max(0.0, rect.width / 2 - self.inset_amount)

        start_point = Point(center.x + radius * math.cos(start.radians),
                            center.y + radius * math.sin(start.radians))
        return (
            PathBuilder()
            .move_to(start_point)
            .arc_to(center, radius, start, end, clockwise=not self.clockwise)
            .build()
        )


# ---------------------------------------------------------------------------
# Circle / Rectangle
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Circle(InsettableShape):
    """Circle centered in the rect, sized to its shorter side."""
    inset_amount: float = 0.0

    def make_path(self, rect: Rect) -> ShapePath:
        center = rect.center
        radius = max(0.0, min(rect.width, rect.height) / 2 - self.inset_amount)
        return (
            PathBuilder()
            .move_to(Point(center.x + radius, center.y))
            .arc_to(center, radius, Angle(0.0), Angle(2 * math.pi), clockwise=False)
            .build()
        )


@dataclass(frozen=True)
class Rectangle(InsettableShape):
    inset_amount: float = 0.0

    def make_path(self, rect: Rect) -> ShapePath:
        return rectangle_path(rect.inset(self.inset_amount))


# ---------------------------------------------------------------------------
# Trapezoid
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Trapezoid(Shape, Animatable):
    """Isosceles trapezoid whose top edge is pulled in by ``inset_amount``."""
    inset_amount: float = 50.0

    animatable_fields = ("inset_amount",)

    def make_path(self, rect: Rect) -> ShapePath:
        start = Point(rect.min_x, rect.max_y)
        return (
            PathBuilder()
            .move_to(start)
            .line_to(Point(rect.min_x + self.inset_amount, rect.min_y))
            .line_to(Point(rect.max_x - self.inset_amount, rect.min_y))
            .line_to(Point(rect.max_x, rect.max_y))
            .line_to(start)
            .build()
        )


# ---------------------------------------------------------------------------
# Arrow
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Arrow(Shape):
    """Upward arrow: triangular head over the top half, shaft below.

    The head spans the full width with its tip at ``min_y``; the shaft is
    one eighth of the width.
    """

    def make_path(self, rect: Rect) -> ShapePath:
        shaft = rect.width / 4 / 2
        half_shaft = shaft / 2
        tip = Point(rect.mid_x, rect.min_y)
        return (
            PathBuilder()
            .move_to(tip)
            .line_to(Point(rect.max_x, rect.mid_y))
            .line_to(Point(rect.mid_x + half_shaft, rect.mid_y))
            .line_to(Point(rect.mid_x + half_shaft, rect.max_y))
            .line_to(Point(rect.mid_x - half_shaft, rect.max_y))
            .line_to(Point(rect.mid_x - half_shaft, rect.mid_y))
            .line_to(Point(rect.min_x, rect.mid_y))
            .line_to(tip)
            .build()
        )
