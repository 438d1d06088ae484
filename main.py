"""
Amber Flock
===========

A decorative 3D boids animation: amber birds flock together and scatter
away from the mouse pointer.

Controls:
    - Mouse move: Scare the flock
    - P: Pause / resume
    - R: Re-seed the flock
    - ESC: Quit

Usage:
    python main.py                          # Open the window
    python main.py --count 200 --seed 7     # Bigger, reproducible flock
    python main.py --headless 600           # Simulate 600 frames, no window
"""

import argparse
import logging
import sys

import numpy as np

from config import flock as config
from flocking import Flock, FlockParams, NumpyRandomSource, PointerTarget, UPDATE_MODES
from core import FrameDriver

logger = logging.getLogger("amber_flock")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="3D boids flocking animation")
    parser.add_argument("--count", "-n", type=int, help=f"Number of boids (default {config.FLOCK['count']})")
    parser.add_argument("--seed", "-s", type=int, default=config.FLOCK["seed"], help="Random seed for a reproducible flock")
    parser.add_argument("--update-mode", choices=UPDATE_MODES, help="Neighbour read policy within a frame")
    parser.add_argument("--headless", type=int, metavar="FRAMES", help="Run N frames without a window and print a summary")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def run_headless(params: FlockParams, seed, frames: int) -> dict:
    """Simulate without rendering and return summary statistics."""
    flock = Flock(params, NumpyRandomSource(seed))
    driver = FrameDriver(flock, PointerTarget())
    driver.run(frames)

    speeds = flock.speeds()
    summary = {
        "frames": driver.frames,
        "boids": flock.num_boids,
        "mean_speed": float(np.mean(speeds)) if len(speeds) else 0.0,
        "max_radius": float(np.max(flock.distances_from_origin())) if len(speeds) else 0.0,
    }
    logger.info("Headless run finished: %s", summary)
    return summary


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        params = FlockParams.from_config(count=args.count, update_mode=args.update_mode)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    if args.headless is not None:
        summary = run_headless(params, args.seed, args.headless)
        print(f"\n  Frames:      {summary['frames']}")
        print(f"  Boids:       {summary['boids']}")
        print(f"  Mean speed:  {summary['mean_speed']:.4f}")
        print(f"  Max radius:  {summary['max_radius']:.2f}\n")
        return 0

    try:
        import pygame
        from OpenGL.error import Error as GLError
        from core.application import Application
    except ImportError as e:
        logger.error("Rendering libraries unavailable, not starting: %s", e)
        return 1

    try:
        app = Application(params, args.seed)
    except (pygame.error, GLError) as e:
        logger.error("Could not open the display, not starting: %s", e)
        pygame.quit()
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
