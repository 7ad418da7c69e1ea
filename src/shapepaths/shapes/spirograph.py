"""
spirograph.py
-------------

Hypotrochoid ("spirograph") curve.

For integer radii R (inner) and r (outer), pen distance d and t in [0, T]:

    x(t) = (R - r) cos t + d cos((R - r) / r * t)
    y(t) = (R - r) sin t - d sin((R - r) / r * t)

The curve closes after T = ceil(2 pi r / gcd(R, r)); ``amount`` in [0, 1]
draws that fraction of it. The loop length grows with r / gcd(R, r), so radii
are capped by ``ShapeConfig.max_spirograph_radius``.
"""

from __future__ import annotations

__all__ = ["Spirograph", "gcd"]

import logging
import math
from dataclasses import dataclass, field

import numpy as np

from shapepaths.config import DEFAULT_CONFIG, LOGGER_NAME, ShapeConfig
from shapepaths.errors import DegenerateGeometryError, RangeViolation
from shapepaths.geometry import Point, Rect, numeric
from shapepaths.path import PathBuilder, ShapePath
from shapepaths.shapes.base import Animatable, Shape

logger = logging.getLogger(LOGGER_NAME)


def gcd(a: numeric, b: numeric) -> int:
    """Greatest common divisor by Euclid's algorithm on the integer parts.

    Returns 0 only when both inputs are 0.
    """
    a, b = abs(int(a)), abs(int(b))
    while b != 0:
        a, b = b, a % b
    return a


@dataclass(frozen=True)
class Spirograph(Shape, Animatable):
    """
    Args:
        inner_radius: Radius of the fixed circle (integer part is used).
        outer_radius: Radius of the rolling circle (integer part is used).
        distance: Pen distance from the rolling circle's center.
        amount: Fraction of the closed curve to draw, in [0, 1].
        config: Supplies the angular step and the radius ceiling.
    """
    inner_radius: int = 125
    outer_radius: int = 75
    distance: float = 25
    amount: float = 1.0
    config: ShapeConfig = field(default=DEFAULT_CONFIG, repr=False)

    animatable_fields = ("distance", "amount")

    def end_theta(self) -> float:
        """Last angle of the curve for the current ``amount``.

        Raises:
            DegenerateGeometryError: If both radii are 0.
        """
        divisor = gcd(self.inner_radius, self.outer_radius)
        if divisor == 0:
            raise DegenerateGeometryError("gcd(0, 0) is undefined")
        return math.ceil(2 * math.pi * int(self.outer_radius) / divisor) * self.amount

    def make_path(self, rect: Rect) -> ShapePath:
        inner, outer = int(self.inner_radius), int(self.outer_radius)
        limit = self.config.max_spirograph_radius
        if max(abs(inner), abs(outer)) > limit:
            raise RangeViolation(
                f"Spirograph radii must not exceed {limit}; "
                f"got inner={inner}, outer={outer}."
            )

        end_theta = self.end_theta()
        if outer == 0:
            raise DegenerateGeometryError("outer radius 0 makes the rolling ratio undefined")

        step = self.config.spirograph_step
        count = math.floor(end_theta / step + 1e-9) + 1 if end_theta >= 0 else 0
        logger.debug(f"Spirograph: {count} samples up to theta={end_theta:.3f}")
        if count == 0:
            return ShapePath()

        difference = inner - outer
        ratio = difference / outer
        theta = np.arange(count) * step
        xs = difference * np.cos(theta) + self.distance * np.cos(ratio * theta) + rect.width / 2
        ys = difference * np.sin(theta) - self.distance * np.sin(ratio * theta) + rect.height / 2

        builder = PathBuilder().move_to(Point(float(xs[0]), float(ys[0])))
        for x, y in zip(xs[1:], ys[1:]):
            builder.line_to(Point(float(x), float(y)))
        return builder.build()
