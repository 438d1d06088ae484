"""Per-frame driver: advance the flock, then hand it to the renderer."""

import logging
from typing import Optional, Protocol

from flocking import Flock, NumpyRandomSource, PointerTarget

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def draw(self, flock: Flock) -> None:
        ...


class FrameDriver:
    """
    Runs one simulation pass per display refresh.

    The pointer is read by the flock at the start of each pass; input
    handling only ever writes it between calls to `step`.
    """

    def __init__(self, flock: Flock, pointer: PointerTarget, renderer: Optional[Renderer] = None):
        self.flock = flock
        self.pointer = pointer
        self.renderer = renderer
        self.paused = False
        self.frames = 0

    def step(self, clock_ms: float):
        """
        Advance one frame.

        Args:
            clock_ms: Wall-clock time in milliseconds, drives wing flapping
        """
        if not self.paused:
            self.flock.update(self.pointer, clock_ms)
        if self.renderer is not None:
            self.renderer.draw(self.flock)
        self.frames += 1

    def run(self, frames: int, frame_ms: float = 1000.0 / 60.0):
        """Step a fixed number of frames on a synthetic clock (headless runs)."""
        for n in range(frames):
            self.step(n * frame_ms)
        logger.debug("Ran %d frames", frames)

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        logger.info("Simulation %s", "paused" if self.paused else "resumed")
        return self.paused

    def reseed(self, seed: Optional[int] = None):
        """Respawn the flock from a fresh random source."""
        self.flock.reseed(NumpyRandomSource(seed))
