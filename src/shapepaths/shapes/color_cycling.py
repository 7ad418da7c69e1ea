"""
color_cycling.py
----------------

Concentric color-cycling rings.

A ring family draws ``steps`` copies of a base shape, the i-th inset by i
units. Each ring carries a hue

    hue = i / steps + amount        (minus 1 when above 1)

and a pair of colors at full and half brightness, which the renderer uses as
the two stops of a gradient stroke. Sweeping ``amount`` over [0, 1] cycles the
colors through the rings.
"""

from __future__ import annotations

__all__ = ["ColorRing", "ColorCyclingCircle", "ColorCyclingRectangle", "ring_hue"]

import logging
from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterator

from matplotlib.colors import hsv_to_rgb

from shapepaths.config import LOGGER_NAME
from shapepaths.geometry import Rect, numeric
from shapepaths.path import PathBuilder, ShapePath
from shapepaths.shapes.base import Animatable, InsettableShape, Shape
from shapepaths.shapes.basic import Circle, Rectangle

logger = logging.getLogger(LOGGER_NAME)

RGB = tuple[float, float, float]


def ring_hue(index: int, steps: int, amount: numeric) -> float:
    """Hue of ring ``index`` out of ``steps``, shifted by ``amount``."""
    target = index / steps + amount
    if target > 1:
        target -= 1
    return target


def hue_color(hue: float, brightness: float = 1.0) -> RGB:
    """Fully saturated RGB color for ``hue`` at the given brightness."""
    r, g, b = hsv_to_rgb((hue, 1.0, brightness))
    return float(r), float(g), float(b)


@dataclass(frozen=True)
class ColorRing:
    """One ring: inset geometry plus its (full, half) brightness color pair."""
    index: int
    hue: float
    colors: tuple[RGB, RGB]
    path: ShapePath


@dataclass(frozen=True)
class ColorCyclingShape(Shape, Animatable):
    """
    Args:
        amount: Phase offset of the hue cycle in [0, 1].
        steps: Number of rings; negative values are treated as 0.
    """
    amount: float = 0.0
    steps: int = 100

    animatable_fields = ("amount",)
    gradient: ClassVar[str] = "linear"

    @abstractmethod
    def base_shape(self) -> InsettableShape:
        raise NotImplementedError

    def rings(self, rect: Rect) -> Iterator[ColorRing]:
        """Yield every ring from the outermost inward."""
        steps = max(0, int(self.steps))
        if steps != self.steps:
            logger.debug(f"{self.__class__.__name__}: steps={self.steps} clamped to {steps}.")
        amount = min(1.0, max(0.0, float(self.amount)))

        base = self.base_shape()
        for index in range(steps):
            hue = ring_hue(index, steps, amount)
            yield ColorRing(
                index=index,
                hue=hue,
                colors=(hue_color(hue, 1.0), hue_color(hue, 0.5)),
                path=base.with_inset(index).path(rect),
            )

    def make_path(self, rect: Rect) -> ShapePath:
        builder = PathBuilder()
        for ring in self.rings(rect):
            builder.append(ring.path)
        return builder.build()


@dataclass(frozen=True)
class ColorCyclingCircle(ColorCyclingShape):
    gradient: ClassVar[str] = "radial"

    def base_shape(self) -> InsettableShape:
        return Circle()


@dataclass(frozen=True)
class ColorCyclingRectangle(ColorCyclingShape):
    gradient: ClassVar[str] = "linear"

    def base_shape(self) -> InsettableShape:
        return Rectangle()
