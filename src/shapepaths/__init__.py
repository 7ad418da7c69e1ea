"""shapepaths - parametric 2D vector path generators with an interpolation contract."""

from shapepaths.errors import (
    ShapePathError, PathStateError, DegenerateGeometryError, RangeViolation,
)
from shapepaths.geometry import Point, Rect, Angle
from shapepaths.path import ShapePath, PathBuilder
from shapepaths.shapes import generate, ALL_SHAPES
from shapepaths.animation import interpolate, lerp_vectors

__version__ = "0.1.0"
