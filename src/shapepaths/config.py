"""
config.py - Configuration dataclasses for path generation and the demo runner.
"""

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

LOGGER_NAME = "shapepaths"


@dataclass(frozen=True)
class ShapeConfig:
    """Immutable tuning constants shared by the generators."""
    spirograph_step: float = 0.01
    max_spirograph_radius: int = 200  # bounds the hypotrochoid loop
    flower_petal_step: float = math.pi / 8


DEFAULT_CONFIG = ShapeConfig()


@dataclass(frozen=True)
class RenderConfig:
    """Immutable configuration for the demo gallery renderer."""
    logger_level: int = logging.INFO
    img_size: Tuple[int, int] = (1200, 900)
    dpi: int = 100
    output_dir: Path = Path("./out")

    def __post_init__(self):
        # Accept plain strings from the command line
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        self.output_dir.mkdir(parents=True, exist_ok=True)
