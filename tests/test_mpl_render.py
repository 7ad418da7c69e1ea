"""
test_mpl_render.py
------------------
Unit tests for mpl_render.py, logging_utils.py, and the demo entry point
"""

import logging
import numpy as np
import pytest
from matplotlib.patches import PathPatch
from matplotlib.path import Path as mplPath

from shapepaths import demo
from shapepaths.config import RenderConfig
from shapepaths.geometry import Rect
from shapepaths.logging_utils import ColorFormatter, configure_logging
from shapepaths.mpl_render import (
    draw_shape, prepare_ax, render_gallery, ring_patches, to_mpl_path, to_patch,
)
from shapepaths.path import ShapePath
from shapepaths.shapes import ColorCyclingCircle, Trapezoid, Triangle


# ---------------------------------------------------------------------------
# Patches
# ---------------------------------------------------------------------------

def test_to_mpl_path_preserves_order(square):
    mpath = to_mpl_path(Triangle().path(square))
    assert np.allclose(mpath.vertices, [(200, 0), (0, 400), (400, 400), (200, 0)])
    assert list(mpath.codes) == [mplPath.MOVETO] + [mplPath.LINETO] * 3


def test_to_mpl_path_type_check():
    with pytest.raises(TypeError):
        to_mpl_path([(0, 0)])


def test_to_patch_style_override(square):
    patch = to_patch(Triangle().path(square), edgecolor="blue", lw=10)
    assert isinstance(patch, PathPatch)
    assert patch.get_linewidth() == 10
    assert patch.get_joinstyle() == "round"


def test_to_patch_accepts_empty_path():
    assert isinstance(to_patch(ShapePath()), PathPatch)


def test_ring_patches_use_full_brightness(square):
    shape = ColorCyclingCircle(amount=0.0, steps=3)
    patches = ring_patches(shape, square)
    assert len(patches) == 3
    assert patches[0].get_edgecolor()[:3] == pytest.approx((1.0, 0.0, 0.0))


# ---------------------------------------------------------------------------
# Axes
# ---------------------------------------------------------------------------

def test_prepare_ax_points_y_down(fig_ax, wide_rect):
    _, ax = fig_ax
    prepare_ax(ax, wide_rect)
    assert ax.get_ylim() == (100, 0)
    assert ax.get_xlim() == (0, 200)


def test_draw_shape_adds_patches(fig_ax, square):
    _, ax = fig_ax
    draw_shape(ax, Trapezoid(), square)
    assert len(ax.patches) == 1
    draw_shape(ax, ColorCyclingCircle(steps=5), square)
    assert len(ax.patches) == 6


# ---------------------------------------------------------------------------
# Gallery / demo
# ---------------------------------------------------------------------------

def test_render_gallery_writes_png(tmp_path):
    config = RenderConfig(img_size=(400, 300), dpi=50, output_dir=tmp_path / "out")
    out = render_gallery([Triangle(), Trapezoid()], config)
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_render_gallery_needs_shapes(tmp_path):
    with pytest.raises(ValueError):
        render_gallery([], RenderConfig(output_dir=tmp_path))


def test_demo_main(tmp_path):
    out = demo.main([
        "--out", str(tmp_path / "out"),
        "--log-dir", str(tmp_path / "logs"),
        "--size", "400", "300",
        "--dpi", "50",
        "--frames", "3",
    ])
    assert out.exists()
    assert (tmp_path / "out" / "trapezoid_frames.png").exists()
    assert list((tmp_path / "logs").glob("demo_PID*.log"))


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def test_configure_logging_replaces_handlers(tmp_path):
    name = "shapepaths.test"
    configure_logging(level=logging.DEBUG, log_dir=tmp_path, name=name)
    log_path = configure_logging(level=logging.DEBUG, log_dir=tmp_path, name=name)
    logger = logging.getLogger(name)
    assert len(logger.handlers) == 2
    assert log_path.parent == tmp_path


def test_color_formatter_includes_level():
    record = logging.LogRecord("shapepaths", logging.WARNING, __file__, 1, "hello", None, None)
    text = ColorFormatter(datefmt="%H:%M:%S").format(record)
    assert "WARNING" in text and "hello" in text
