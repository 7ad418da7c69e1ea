"""
geometry.py
-----------

Value types and affine helpers shared by every path generator.

Points and rectangles are plain immutable values. Affine transforms are
Matplotlib ``Affine2D`` objects, so the same matrices can be handed to the
rendering side unchanged.

Composition convention:

    compose(first, second) -> Affine2D

        The returned transform applies ``first`` and then ``second``. This is the
        order Matplotlib uses for chained calls, i.e.

            compose(rotation(theta), translation(dx, dy))
            == Affine2D().rotate(theta).translate(dx, dy)

        Rotation is about the origin, so rotating first and then translating
        spins a shape in place before moving it, while the reverse revolves
        the already shifted shape around the origin.
"""

from __future__ import annotations

__all__ = [
    "Point", "Rect", "Angle",
    "rotate", "translate", "rotation", "translation", "compose", "apply",
    "numeric",
]

import math
from dataclasses import dataclass
from typing import NamedTuple, TypeAlias, Union

import numpy as np
from matplotlib.transforms import Affine2D

numeric: TypeAlias = Union[int, float]


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------
class Point(NamedTuple):
    """Immutable (x, y) coordinate pair."""
    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


# ---------------------------------------------------------------------------
# Rect
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its origin and size.

    The origin is the minimum corner. In the Y-down coordinates used by
    callers, ``min_y`` is the top edge.
    """
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def min_x(self) -> float: return self.x

    @property
    def mid_x(self) -> float: return self.x + self.width / 2

    @property
    def max_x(self) -> float: return self.x + self.width

    @property
    def min_y(self) -> float: return self.y

    @property
    def mid_y(self) -> float: return self.y + self.height / 2

    @property
    def max_y(self) -> float: return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.x, self.y, self.width, self.height))

    def inset(self, amount: numeric) -> Rect:
        """Return a copy shrunk by ``amount`` on every side.

        Size never goes negative; an over-inset rectangle collapses onto its
        center.
        """
        width = max(0.0, self.width - 2 * amount)
        height = max(0.0, self.height - 2 * amount)
        return Rect(self.mid_x - width / 2, self.mid_y - height / 2, width, height)


# ---------------------------------------------------------------------------
# Angle
# ---------------------------------------------------------------------------
@dataclass(frozen=True, order=True)
class Angle:
    """Angle stored in radians.

    Use ``Angle.from_degrees()`` / ``Angle.from_radians()`` to construct, and the
    ``degrees`` / ``radians`` properties to read.
    """
    radians: float = 0.0

    @classmethod
    def from_degrees(cls, degrees: numeric) -> Angle:
        return cls(math.radians(degrees))

    @classmethod
    def from_radians(cls, radians: numeric) -> Angle:
        return cls(float(radians))

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    def __add__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __sub__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians - other.radians)

    def __neg__(self) -> Angle:
        return Angle(-self.radians)


def _as_radians(angle: Union[Angle, numeric]) -> float:
    if isinstance(angle, Angle):
        return angle.radians
    if isinstance(angle, (int, float, np.floating, np.integer)):
        return float(angle)
    raise TypeError(f"Expected Angle or radians as a number, got {type(angle).__name__}.")


# ---------------------------------------------------------------------------
# Point operations
# ---------------------------------------------------------------------------
def rotate(point: Point, angle: Union[Angle, numeric]) -> Point:
    """Rotate ``point`` about the origin. Bare numbers are radians."""
    theta = _as_radians(angle)
    c, s = math.cos(theta), math.sin(theta)
    return Point(point[0] * c - point[1] * s, point[0] * s + point[1] * c)


def translate(point: Point, dx: numeric, dy: numeric) -> Point:
    return Point(point[0] + dx, point[1] + dy)


# ---------------------------------------------------------------------------
# Affine transforms
# ---------------------------------------------------------------------------
def rotation(angle: Union[Angle, numeric]) -> Affine2D:
    """Rotation about the origin. Bare numbers are radians."""
    return Affine2D().rotate(_as_radians(angle))


def translation(dx: numeric, dy: numeric) -> Affine2D:
    return Affine2D().translate(dx, dy)


def compose(first: Affine2D, second: Affine2D) -> Affine2D:
    """Return a transform applying ``first`` and then ``second``.

    Args:
        first: Transform applied to the input point first.
        second: Transform applied to the result of ``first``.

    Returns:
        Affine2D: A new, independent transform (inputs are not modified).

    Raises:
        TypeError: If either argument is not an ``Affine2D``.
    """
    for t in (first, second):
        if not isinstance(t, Affine2D):
            raise TypeError(f"Expected a Matplotlib Affine2D, got {type(t).__name__}.")
    return Affine2D(second.get_matrix() @ first.get_matrix())


def apply(transform: Affine2D, point: Point) -> Point:
    x, y = transform.transform_point((point[0], point[1]))
    return Point(float(x), float(y))
