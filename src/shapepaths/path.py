"""
path.py
-------

Path commands, the immutable ``ShapePath`` container, and ``PathBuilder``.

A ``ShapePath`` is an ordered tuple of commands:

    MoveTo(point)                                   start a new subpath
    LineTo(point)                                   straight segment
    CurveTo(control1, control2, point)              cubic Bezier segment
    ArcTo(center, radius, start, end, clockwise)    circular arc
    AppendSubpath(path)                             independent nested path

Nothing is closed implicitly. Shapes that need a closed silhouette repeat
their first point as a final ``LineTo``, so a round stroke join is rendered at
the starting vertex too.

Arc angles use the raw mathematical convention: 0 points along +X and, with
``clockwise=False``, the sweep runs towards increasing angles. An ``ArcTo``
connects to the current point with a straight segment, as a pen would.

Conversion to and from Matplotlib:

    ShapePath.to_mpl() -> matplotlib.path.Path
    ShapePath.from_mpl(path) -> ShapePath

Arcs become chains of cubic Bezier segments (``Path.arc``); appended subpaths
are inlined; CLOSEPOLY on import becomes an explicit ``LineTo`` back to the
subpath start.
"""

from __future__ import annotations

__all__ = [
    "MoveTo", "LineTo", "CurveTo", "ArcTo", "AppendSubpath", "PathCommand",
    "ShapePath", "PathBuilder",
]

import math
from dataclasses import dataclass
from typing import Iterator, Optional, TypeAlias, Union

import numpy as np
from matplotlib.path import Path as mplPath
from matplotlib.transforms import Affine2D

from shapepaths.errors import PathStateError
from shapepaths.geometry import Angle, Point, numeric


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class CurveTo:
    control1: Point
    control2: Point
    point: Point


@dataclass(frozen=True)
class ArcTo:
    center: Point
    radius: float
    start: Angle
    end: Angle
    clockwise: bool

    def point_at(self, angle: Angle) -> Point:
        return Point(self.center.x + self.radius * math.cos(angle.radians),
                     self.center.y + self.radius * math.sin(angle.radians))

    @property
    def start_point(self) -> Point:
        return self.point_at(self.start)

    @property
    def point(self) -> Point:
        return self.point_at(self.end)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (
            self.center.x, self.center.y, self.radius, self.start.radians, self.end.radians,
        ))


@dataclass(frozen=True)
class AppendSubpath:
    path: ShapePath


PathCommand: TypeAlias = Union[MoveTo, LineTo, CurveTo, ArcTo, AppendSubpath]


# ---------------------------------------------------------------------------
# ShapePath
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ShapePath:
    """Immutable ordered sequence of path commands. Empty is valid."""
    commands: tuple[PathCommand, ...] = ()

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __bool__(self) -> bool:
        return bool(self.commands)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------
    def flatten(self) -> ShapePath:
        """Return an equivalent path with every ``AppendSubpath`` inlined."""
        return ShapePath(tuple(self._iter_flat()))

    def _iter_flat(self) -> Iterator[PathCommand]:
        for cmd in self.commands:
            if isinstance(cmd, AppendSubpath):
                yield from cmd.path._iter_flat()
            else:
                yield cmd

    def points(self) -> list[Point]:
        """End points of all drawing commands, in drawing order."""
        return [cmd.point for cmd in self._iter_flat()]

    @property
    def last_point(self) -> Optional[Point]:
        flat = self.flatten().commands
        return flat[-1].point if flat else None

    def subpaths(self) -> list[ShapePath]:
        """Split the flattened path at every ``MoveTo``."""
        runs: list[list[PathCommand]] = []
        for cmd in self._iter_flat():
            if isinstance(cmd, MoveTo) or not runs:
                runs.append([])
            runs[-1].append(cmd)
        return [ShapePath(tuple(run)) for run in runs]

    # -------------------------------------------------------------------------
    # Transformation
    # -------------------------------------------------------------------------
    def transformed(self, transform: Affine2D) -> ShapePath:
        """Apply an affine transform to every point (control points included).

        Arcs are converted to Bezier chains first, since a general affine map
        does not keep them circular.
        """
        if not isinstance(transform, Affine2D):
            raise TypeError(f"Expected a Matplotlib Affine2D, got {type(transform).__name__}.")
        if not self.commands:
            return self
        return ShapePath.from_mpl(transform.transform_path(self.to_mpl()))

    # -------------------------------------------------------------------------
    # Matplotlib conversion
    # -------------------------------------------------------------------------
    def to_mpl(self) -> mplPath:
        """Convert to a Matplotlib ``Path`` (MOVETO / LINETO / CURVE4 codes only)."""
        verts: list = []
        codes: list = []
        for cmd in self._iter_flat():
            if isinstance(cmd, MoveTo):
                verts.append(cmd.point)
                codes.append(mplPath.MOVETO)
            elif isinstance(cmd, LineTo):
                verts.append(cmd.point)
                codes.append(mplPath.LINETO)
            elif isinstance(cmd, CurveTo):
                verts.extend([cmd.control1, cmd.control2, cmd.point])
                codes.extend([mplPath.CURVE4] * 3)
            elif isinstance(cmd, ArcTo):
                arc_verts = _arc_vertices(cmd)
                if arc_verts is None:
                    continue
                verts.extend(arc_verts)
                codes.append(mplPath.LINETO)
                codes.extend([mplPath.CURVE4] * (len(arc_verts) - 1))

        if not verts:
            return mplPath(np.empty((0, 2), dtype=float))
        return mplPath(np.array(verts, dtype=float), np.array(codes, dtype=mplPath.code_type))

    @classmethod
    def from_mpl(cls, path: mplPath) -> ShapePath:
        """Build a ``ShapePath`` from a Matplotlib ``Path``.

        Raises:
            TypeError: If ``path`` is not a Matplotlib ``Path``.
        """
        if not isinstance(path, mplPath):
            raise TypeError(f"Expected a Matplotlib Path, got {type(path).__name__}.")

        builder = PathBuilder()
        start: Optional[Point] = None
        for seg, code in path.iter_segments(simplify=False, curves=True):
            pts = [Point(float(x), float(y)) for x, y in np.asarray(seg).reshape(-1, 2)]
            if code == mplPath.MOVETO:
                start = pts[-1]
                builder.move_to(start)
            elif code == mplPath.LINETO:
                builder.line_to(pts[-1])
            elif code == mplPath.CURVE3:
                # Degree elevation: quadratic (p0, q, p2) -> cubic
                p0, (q, p2) = builder.current_point, pts
                builder.curve_to(
                    Point(p0.x + 2 / 3 * (q.x - p0.x), p0.y + 2 / 3 * (q.y - p0.y)),
                    Point(p2.x + 2 / 3 * (q.x - p2.x), p2.y + 2 / 3 * (q.y - p2.y)),
                    p2,
                )
            elif code == mplPath.CURVE4:
                builder.curve_to(*pts)
            elif code == mplPath.CLOSEPOLY:
                if start is not None:
                    builder.line_to(start)
            elif code == mplPath.STOP:
                break
        return builder.build()


def _arc_vertices(cmd: ArcTo) -> Optional[np.ndarray]:
    """Bezier vertices of an arc: start point followed by CURVE4 triples."""
    if not cmd.is_finite():
        return None
    start_deg, end_deg = cmd.start.degrees, cmd.end.degrees
    if cmd.clockwise:
        unit = mplPath.arc(end_deg, start_deg).vertices[::-1]
    else:
        unit = mplPath.arc(start_deg, end_deg).vertices
    radius = max(0.0, cmd.radius)
    return unit * radius + np.array([cmd.center.x, cmd.center.y])


# ---------------------------------------------------------------------------
# PathBuilder
# ---------------------------------------------------------------------------
class PathBuilder:
    """Accumulates commands into a ``ShapePath``.

    ``line_to``, ``curve_to`` and ``arc_to`` need a current point and raise
    ``PathStateError`` before the first ``move_to``. All methods return the
    builder for chaining.

    Example:
        >>> path = (PathBuilder()
        ...         .move_to(Point(0, 0))
        ...         .line_to(Point(10, 0))
        ...         .build())
    """

    __slots__ = ("_commands", "_current")

    def __init__(self) -> None:
        self._commands: list[PathCommand] = []
        self._current: Optional[Point] = None

    @property
    def current_point(self) -> Optional[Point]:
        return self._current

    def _require_current(self, op: str) -> None:
        if self._current is None:
            raise PathStateError(f"{op}() called before move_to(); the path has no current point.")

    def move_to(self, point: Point) -> PathBuilder:
        point = Point(*point)
        self._commands.append(MoveTo(point))
        self._current = point
        return self

    def line_to(self, point: Point) -> PathBuilder:
        self._require_current("line_to")
        point = Point(*point)
        self._commands.append(LineTo(point))
        self._current = point
        return self

    def curve_to(self, control1: Point, control2: Point, point: Point) -> PathBuilder:
        self._require_current("curve_to")
        cmd = CurveTo(Point(*control1), Point(*control2), Point(*point))
        self._commands.append(cmd)
        self._current = cmd.point
        return self

    def arc_to(self,
               center    : Point,
               radius    : numeric,
               start     : Angle,
               end       : Angle,
               clockwise : bool,
        ) -> PathBuilder:
        """Append a circular arc in raw mathematical angle convention."""
        self._require_current("arc_to")
        if not isinstance(start, Angle) or not isinstance(end, Angle):
            raise TypeError(
                f"start/end must be Angle instances; got "
                f"{type(start).__name__}/{type(end).__name__}."
            )
        cmd = ArcTo(Point(*center), float(radius), start, end, bool(clockwise))
        self._commands.append(cmd)
        self._current = cmd.point
        return self

    def append(self, path: ShapePath) -> PathBuilder:
        """Append ``path`` as an independent subpath (no connecting line)."""
        if not isinstance(path, ShapePath):
            raise TypeError(f"Expected a ShapePath, got {type(path).__name__}.")
        if not path:
            return self
        self._commands.append(AppendSubpath(path))
        last = path.last_point
        if last is not None:
            self._current = last
        return self

    def build(self) -> ShapePath:
        return ShapePath(tuple(self._commands))
