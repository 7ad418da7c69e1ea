"""
-------
conftest.py
-------
Shared pytest fixtures for shapepaths tests.
"""

import pytest
import matplotlib
matplotlib.use("Agg")  # headless backend for CI
import matplotlib.pyplot as plt

from shapepaths.geometry import Rect


# -----------------------------------------------------------------------------
# Core Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def fig_ax():
  """
  Create and yield an isolated Matplotlib Figure/Axes pair.

  The figure is automatically closed after the test to avoid memory leaks.
  """
  fig, ax = plt.subplots(figsize=(4, 3))
  yield fig, ax
  plt.close(fig)


# -----------------------------------------------------------------------------
# Geometry fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def square() -> Rect:
  """400x400 rect at the origin."""
  return Rect(0, 0, 400, 400)


@pytest.fixture
def wide_rect() -> Rect:
  """200x100 rect at the origin."""
  return Rect(0, 0, 200, 100)


@pytest.fixture
def offset_rect() -> Rect:
  """Rect away from the origin, for origin-dependent checks."""
  return Rect(50, 30, 300, 200)
