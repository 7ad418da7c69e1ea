"""
errors.py
---------

Exception hierarchy for shapepaths.

    ShapePathError
     |- PathStateError           drawing command issued without a current point
     |- DegenerateGeometryError  undefined geometry (0/0 gcd, NaN parameter);
     |                           Shape.path() turns it into an empty path
     |- RangeViolation           parameter outside a domain that cannot be clamped
"""

__all__ = ["ShapePathError", "PathStateError", "DegenerateGeometryError", "RangeViolation"]


class ShapePathError(Exception):
    """Base class for all shapepaths errors."""


class PathStateError(ShapePathError, RuntimeError):
    """A command needing a current point was issued before any move_to()."""


class DegenerateGeometryError(ShapePathError, ValueError):
    """Geometry is undefined for the given parameters."""


class RangeViolation(ShapePathError, ValueError):
    """Parameter is outside its documented domain."""
