"""
flower.py
---------

Flower of elliptical petals spun around the rect center.

Each petal is an ellipse laid along +X from the origin. It is rotated about
the origin first and only then moved to the center of the rect; reversing the
order would revolve the shifted petal around the canvas origin instead.
"""

from __future__ import annotations

__all__ = ["Flower"]

import math
from dataclasses import dataclass, field

from shapepaths.config import DEFAULT_CONFIG, ShapeConfig
from shapepaths.geometry import Rect, compose, rotation, translation
from shapepaths.path import PathBuilder, ShapePath
from shapepaths.shapes.base import Animatable, Shape
from shapepaths.shapes.basic import ellipse_path


@dataclass(frozen=True)
class Flower(Shape, Animatable):
    """
    Args:
        petal_offset: Horizontal shift of each petal ellipse from the center.
        petal_width: Length of each petal along its axis.
        config: Supplies the angular step between petals.
    """
    petal_offset: float = -20.0
    petal_width: float = 100.0
    config: ShapeConfig = field(default=DEFAULT_CONFIG, repr=False)

    animatable_fields = ("petal_offset", "petal_width")

    def petal_angles(self) -> list[float]:
        """Angles in [0, 2*pi) stepping by ``config.flower_petal_step``."""
        step = self.config.flower_petal_step
        count = math.ceil(round(2 * math.pi / step, 9))
        return [k * step for k in range(count)]

    def make_path(self, rect: Rect) -> ShapePath:
        petal = ellipse_path(Rect(self.petal_offset, 0.0, self.petal_width, rect.width / 2))
        builder = PathBuilder()
        for theta in self.petal_angles():
            trans = compose(rotation(theta), translation(rect.width / 2, rect.height / 2))
            builder.append(petal.transformed(trans))
        return builder.build()
