"""
demo.py - Entry point rendering a gallery of every shape to PNG.
"""

import argparse
import logging
import time
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence

import matplotlib as mpl

# Non-interactive backend; the demo only writes files
mpl.use("Agg")

from shapepaths.animation import keyframes
from shapepaths.config import LOGGER_NAME, RenderConfig
from shapepaths.logging_utils import configure_logging
from shapepaths.mpl_render import render_gallery
from shapepaths.shapes import (
    Arc, Arrow, Checkerboard, ColorCyclingCircle, ColorCyclingRectangle,
    Flower, Shape, Spirograph, Trapezoid, Triangle,
)


def gallery_shapes() -> list[Shape]:
    """Shapes shown in the gallery, roughly in tutorial order."""
    return [
        Triangle(),
        Arc(start_angle=0, end_angle=110, clockwise=True).with_inset(20),
        Flower(),
        ColorCyclingCircle(amount=0.3, steps=100),
        ColorCyclingRectangle(amount=0.6, steps=100),
        Spirograph(inner_radius=125, outer_radius=75, distance=25, amount=1.0),
        Checkerboard(rows=4, columns=4),
        Trapezoid(inset_amount=50),
        Arrow(),
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shapepaths-demo",
                                     description="Render a gallery of shapepaths shapes.")
    parser.add_argument("--out", default="./out", help="output directory")
    parser.add_argument("--size", type=int, nargs=2, default=(1200, 900),
                        metavar=("W", "H"), help="image size in pixels")
    parser.add_argument("--dpi", type=int, default=100)
    parser.add_argument("--frames", type=int, default=0,
                        help="also render N trapezoid keyframes (0 to skip)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-dir", default="logs")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> Path:
    """Render the gallery and return the written image path."""
    args = build_parser().parse_args(argv)
    config = RenderConfig(
        logger_level=getattr(logging, args.log_level),
        img_size=tuple(args.size),
        dpi=args.dpi,
        output_dir=Path(args.out),
    )

    log_path = configure_logging(level=config.logger_level, log_dir=args.log_dir,
                                 name=LOGGER_NAME, run_prefix="demo")
    logger = logging.getLogger(LOGGER_NAME)
    logger.info(f"RenderConfig: {asdict(config)}")
    logger.info(f"Logs written to: {log_path}")

    start = time.perf_counter()
    out_path = render_gallery(gallery_shapes(), config)

    if args.frames:
        frames = keyframes(Trapezoid(inset_amount=10), Trapezoid(inset_amount=90), args.frames)
        render_gallery(frames, config, filename="trapezoid_frames.png")

    logger.info(f"Done in {time.perf_counter() - start:.2f}s")
    return out_path


if __name__ == "__main__":
    main()
