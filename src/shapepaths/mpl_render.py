"""
mpl_render.py
-------------

Hand-off of generated paths to Matplotlib.

Shapes are generated in Y-down screen coordinates, so every axis prepared here
is inverted. Stroking, filling and gradient approximation are all Matplotlib's
business; this module only wraps paths into artists.
"""

from __future__ import annotations

__all__ = ["to_mpl_path", "to_patch", "ring_patches", "prepare_ax", "draw_shape", "render_gallery"]

import logging
from pathlib import Path
from typing import Any, Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import PathPatch
from matplotlib.path import Path as mplPath

from shapepaths.config import LOGGER_NAME, RenderConfig
from shapepaths.geometry import Rect
from shapepaths.path import ShapePath
from shapepaths.shapes import Shape
from shapepaths.shapes.color_cycling import ColorCyclingShape

logger = logging.getLogger(LOGGER_NAME)

DEFAULT_STYLE = {"facecolor": "none", "edgecolor": "black", "lw": 2,
                 "capstyle": "round", "joinstyle": "round"}


def to_mpl_path(path: ShapePath) -> mplPath:
    if not isinstance(path, ShapePath):
        raise TypeError(f"Expected a ShapePath, got {type(path).__name__}.")
    return path.to_mpl()


def to_patch(path: ShapePath, **style: Any) -> PathPatch:
    """Wrap ``path`` into a ``PathPatch``; ``style`` overrides DEFAULT_STYLE."""
    return PathPatch(to_mpl_path(path), **{**DEFAULT_STYLE, **style})


def ring_patches(shape: ColorCyclingShape, rect: Rect, lw: float = 2) -> list[PathPatch]:
    """One stroked patch per ring, outermost first.

    Matplotlib has no gradient strokes; each ring uses the full-brightness
    color, which is the outer stop of the gradient.
    """
    return [
        to_patch(ring.path, edgecolor=ring.colors[0], lw=lw)
        for ring in shape.rings(rect)
    ]


def prepare_ax(ax: Axes, rect: Rect) -> Axes:
    """Fit ``ax`` to ``rect`` with Y pointing down."""
    ax.set_xlim(rect.min_x, rect.max_x)
    ax.set_ylim(rect.max_y, rect.min_y)
    ax.set_aspect("equal")
    ax.axis("off")
    return ax


def draw_shape(ax: Axes, shape: Shape, rect: Rect, **style: Any) -> list[PathPatch]:
    """Generate ``shape`` in ``rect`` and add the resulting patches to ``ax``."""
    if isinstance(shape, ColorCyclingShape):
        patches = ring_patches(shape, rect)
    else:
        patches = [to_patch(shape.path(rect), **style)]
    for patch in patches:
        ax.add_patch(patch)
    return patches


def render_gallery(shapes: Sequence[Shape], config: RenderConfig,
                   filename: str = "gallery.png", cell: Rect = Rect(0, 0, 300, 300)) -> Path:
    """Draw each shape in its own cell and save the figure as PNG.

    Returns:
        Path: Location of the written image.
    """
    n = len(shapes)
    if n == 0:
        raise ValueError("Expected at least one shape to render.")
    cols = min(4, n)
    rows = -(-n // cols)

    width, height = config.img_size
    fig, axes = plt.subplots(rows, cols, figsize=(width / config.dpi, height / config.dpi),
                             dpi=config.dpi, squeeze=False)
    try:
        for ax in axes.flat:
            ax.axis("off")
        for ax, shape in zip(axes.flat, shapes):
            prepare_ax(ax, cell)
            draw_shape(ax, shape, cell)
            ax.set_title(type(shape).__name__, fontsize=9)
            logger.debug(f"Rendered {shape!r}")

        out_path = config.output_dir / filename
        fig.tight_layout()
        fig.savefig(out_path, dpi=config.dpi)
    finally:
        plt.close(fig)

    logger.info(f"Gallery written: {out_path}")
    return out_path
