"""
animation.py
------------

Interpolation between two parameter sets of the same animatable shape.

The caller owns time: it picks the progress fraction and feeds the
interpolated shape back into ``path(rect)``. Nothing here schedules frames.
"""

from __future__ import annotations

__all__ = ["lerp_vectors", "interpolate", "keyframes"]

from typing import Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from shapepaths.errors import RangeViolation
from shapepaths.shapes.base import Animatable

A = TypeVar("A", bound=Animatable)


def _check_fraction(fraction: float) -> float:
    fraction = float(fraction)
    if not 0.0 <= fraction <= 1.0:
        raise RangeViolation(f"Progress fraction must be in [0, 1]; got {fraction}.")
    return fraction


def lerp_vectors(start: Sequence[float], end: Sequence[float], fraction: float) -> NDArray[np.float64]:
    """Component-wise ``start + (end - start) * fraction``.

    Raises:
        ValueError: If the vectors differ in length.
        RangeViolation: If ``fraction`` is outside [0, 1].
    """
    fraction = _check_fraction(fraction)
    a = np.asarray(start, dtype=np.float64)
    b = np.asarray(end, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"Vector shapes differ: {a.shape} vs {b.shape}.")
    return a + (b - a) * fraction


def interpolate(start: A, end: A, fraction: float) -> A:
    """Shape between ``start`` and ``end`` at ``fraction``.

    Non-animatable fields are taken from ``start``.

    Raises:
        TypeError: If the shapes are not animatable or not of the same class.
    """
    if not isinstance(start, Animatable):
        raise TypeError(f"Expected an Animatable shape, got {type(start).__name__}.")
    if type(start) is not type(end):
        raise TypeError(
            f"Cannot interpolate {type(start).__name__} into {type(end).__name__}."
        )
    return start.from_vector(lerp_vectors(start.to_vector(), end.to_vector(), fraction))


def keyframes(start: A, end: A, count: int) -> list[A]:
    """``count`` evenly spaced shapes from ``start`` to ``end`` inclusive."""
    if count < 2:
        raise ValueError(f"count must be at least 2; got {count}.")
    return [interpolate(start, end, f) for f in np.linspace(0.0, 1.0, count)]
