"""
base.py
-------

Defines the abstract contracts shared by all shapes.

    Shape           - (rect) -> ShapePath, degrading undefined geometry to an
                      empty path.
    InsettableShape - Shape carrying an additive ``inset_amount``.
    Animatable      - explicit flat-vector view of the continuously variable
                      parameters, for an external interpolation driver.

Concrete shapes are frozen dataclasses; their fields are the shape parameters.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from abc import ABC, abstractmethod
from typing import ClassVar, Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from shapepaths.config import LOGGER_NAME
from shapepaths.errors import DegenerateGeometryError
from shapepaths.geometry import Rect, numeric
from shapepaths.path import ShapePath

logger = logging.getLogger(LOGGER_NAME)

S = TypeVar("S", bound="Shape")


class Shape(ABC):
    """
    Abstract base class for all path generators (triangle, arc, flower, etc.).

    Subclasses implement ``make_path(rect)``. Callers use ``path(rect)``, which
    validates the inputs and turns ``DegenerateGeometryError`` into an empty
    path: a drawing surface has nothing sensible to do with a crash.
    """

    def path(self, rect: Rect) -> ShapePath:
        """Generate the path of this shape inside ``rect``.

        Raises:
            TypeError: If ``rect`` is not a ``Rect``.
        """
        if not isinstance(rect, Rect):
            raise TypeError(f"rect must be a Rect, not {type(rect).__name__}")
        try:
            self._check_finite(rect)
            return self.make_path(rect)
        except DegenerateGeometryError as err:
            logger.warning(f"{self.__class__.__name__}: {err}; returning empty path.")
            return ShapePath()

    @abstractmethod
    def make_path(self, rect: Rect) -> ShapePath:
        """Build the path. May raise ``DegenerateGeometryError``."""
        raise NotImplementedError

    def _check_finite(self, rect: Rect) -> None:
        if not rect.is_finite():
            raise DegenerateGeometryError(f"non-finite rect {rect}")
        if not dataclasses.is_dataclass(self):
            return
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                if not math.isfinite(value):
                    raise DegenerateGeometryError(f"non-finite parameter {f.name}={value}")


class InsettableShape(Shape):
    """Shape that can be shrunk inward; subclasses declare ``inset_amount``."""

    inset_amount: float

    def with_inset(self: S, amount: numeric) -> S:
        """Return a copy inset by a further ``amount``.

        Insets accumulate: ``s.with_inset(a).with_inset(b)`` equals
        ``s.with_inset(a + b)``.
        """
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise TypeError(f"inset amount must be numeric, not {type(amount).__name__}")
        return dataclasses.replace(self, inset_amount=self.inset_amount + amount)


class Animatable(ABC):
    """
    Bidirectional mapping between named parameters and a flat float vector.

    ``animatable_fields`` fixes the vector order per class; it is declared,
    never inferred. Integer parameters travel as floats and are coerced only
    on the way back in ``_coerce``.
    """

    animatable_fields: ClassVar[tuple[str, ...]] = ()

    def to_vector(self) -> NDArray[np.float64]:
        return np.array([float(getattr(self, name)) for name in self.animatable_fields],
                        dtype=np.float64)

    def from_vector(self: S, vector: Sequence[float]) -> S:
        """Return a copy whose animatable fields are read back from ``vector``.

        Raises:
            ValueError: If the vector length does not match ``animatable_fields``.
        """
        values = np.asarray(vector, dtype=np.float64).ravel()
        if values.size != len(self.animatable_fields):
            raise ValueError(
                f"{self.__class__.__name__} expects {len(self.animatable_fields)} "
                f"animatable values {self.animatable_fields}, got {values.size}."
            )
        changes = {name: self._coerce(name, float(v))
                   for name, v in zip(self.animatable_fields, values)}
        return dataclasses.replace(self, **changes)

    def _coerce(self, name: str, value: float):
        return value
