"""
checkerboard.py
---------------

Checkerboard of ``rows`` x ``columns`` cells; every cell whose row + column is
even becomes an independent rectangle subpath. With even-odd or non-zero fill
the renderer colors exactly those cells.
"""

from __future__ import annotations

__all__ = ["Checkerboard"]

import logging
from dataclasses import dataclass

from shapepaths.config import LOGGER_NAME
from shapepaths.geometry import Rect
from shapepaths.path import PathBuilder, ShapePath
from shapepaths.shapes.base import Animatable, Shape
from shapepaths.shapes.basic import rectangle_path

logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class Checkerboard(Shape, Animatable):
    """
    Animates as the float pair (rows, columns). Values read back from a vector
    are truncated toward zero, so 8.7 rows render as 8.
    """
    rows: int = 4
    columns: int = 4

    animatable_fields = ("rows", "columns")

    def _coerce(self, name: str, value: float) -> int:
        return int(value)

    def make_path(self, rect: Rect) -> ShapePath:
        rows, columns = int(self.rows), int(self.columns)
        if rows <= 0 or columns <= 0:
            logger.debug(f"Checkerboard: {rows}x{columns} grid clamped to empty.")
            return ShapePath()

        row_size = rect.height / rows
        column_size = rect.width / columns

        builder = PathBuilder()
        for row in range(rows):
            for column in range(columns):
                if (row + column) % 2 == 0:
                    cell = Rect(rect.min_x + column * column_size,
                                rect.min_y + row * row_size,
                                column_size, row_size)
                    builder.append(rectangle_path(cell))
        return builder.build()
