"""
Shape package for shapepaths.

Every shape is a frozen dataclass of its parameters and exposes
``path(rect) -> ShapePath``.

Usage::

    from shapepaths.geometry import Rect
    from shapepaths.shapes import Spirograph, generate
    path = generate(Rect(0, 0, 400, 400), Spirograph(amount=0.5))
"""

from shapepaths.geometry import Rect
from shapepaths.path import ShapePath
from shapepaths.shapes.base import Animatable, InsettableShape, Shape
from shapepaths.shapes.basic import (
    Arc, Arrow, Circle, Rectangle, Trapezoid, Triangle, ellipse_path, rectangle_path,
)
from shapepaths.shapes.checkerboard import Checkerboard
from shapepaths.shapes.color_cycling import (
    ColorCyclingCircle, ColorCyclingRectangle, ColorRing, ring_hue,
)
from shapepaths.shapes.flower import Flower
from shapepaths.shapes.spirograph import Spirograph, gcd

__all__ = [
    "Shape", "InsettableShape", "Animatable",
    "Triangle", "Arc", "Circle", "Rectangle", "Trapezoid", "Arrow",
    "Flower", "Spirograph", "Checkerboard",
    "ColorCyclingCircle", "ColorCyclingRectangle", "ColorRing",
    "ellipse_path", "rectangle_path", "ring_hue", "gcd",
    "ALL_SHAPES", "generate",
]


ALL_SHAPES = (
    Triangle,
    Arc,
    Circle,
    Rectangle,
    Trapezoid,
    Arrow,
    Flower,
    Spirograph,
    Checkerboard,
    ColorCyclingCircle,
    ColorCyclingRectangle,
)


def generate(rect: Rect, shape: Shape) -> ShapePath:
    """Generate ``shape`` inside ``rect``."""
    if not isinstance(shape, Shape):
        raise TypeError(f"Expected a Shape, got {type(shape).__name__}.")
    return shape.path(rect)
