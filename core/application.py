"""Main application class that ties everything together."""

import logging
from typing import Optional

import pygame
from pygame.locals import *
from OpenGL.GL import *
from OpenGL.GLU import *

from config import flock as config
from flocking import Flock, FlockParams, NumpyRandomSource, PointerTarget
from rendering.birds import BirdRenderer
from rendering.text import TextRenderer
from .camera import Camera
from .driver import FrameDriver
from .input_handler import InputHandler

logger = logging.getLogger(__name__)


class Application:
    """Main application managing the window, the frame loop and rendering."""

    def __init__(self, params: Optional[FlockParams] = None, seed: Optional[int] = None):
        pygame.init()
        flags = DOUBLEBUF | OPENGL
        if config.WINDOW["resizable"]:
            flags |= RESIZABLE
        pygame.display.set_mode((config.WINDOW["width"], config.WINDOW["height"]), flags)
        pygame.display.set_caption(config.WINDOW["title"])

        # Core components
        self.camera = Camera(config.WINDOW["width"], config.WINDOW["height"])
        self.pointer = PointerTarget()

        # Rendering components
        self.bird_renderer = BirdRenderer()
        self.text_renderer = TextRenderer()

        # Simulation
        self.flock = Flock(params, NumpyRandomSource(seed))
        self.flock.warmup()
        self.driver = FrameDriver(self.flock, self.pointer, self.bird_renderer)
        self.input_handler = InputHandler(self.camera, self.pointer, self.driver)

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0

        self._setup_gl()
        logger.info(
            "Started %d boids (%s updates, seed=%s)",
            self.flock.num_boids, self.flock.params.update_mode, seed
        )

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glEnable(GL_DEPTH_TEST)
        self.bird_renderer.setup_lighting()
        self._setup_projection()

    def _setup_projection(self):
        """Match viewport and projection to the current window size."""
        glViewport(0, 0, self.camera.width, self.camera.height)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(self.camera.fov, self.camera.aspect, self.camera.near_clip, self.camera.far_clip)
        glMatrixMode(GL_MODELVIEW)

    def _apply_camera(self):
        pos, target = self.camera.position, self.camera.target
        glLoadIdentity()
        gluLookAt(
            pos[0], pos[1], pos[2],
            target[0], target[1], target[2],
            0, 1, 0
        )

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

        if self.input_handler.resized:
            self._setup_projection()
            self.input_handler.resized = False

    def _render_hud(self):
        screen_size = (self.camera.width, self.camera.height)
        pointer = "active" if self.pointer.active else "idle"
        status = "  |  PAUSED" if self.driver.paused else ""
        self.text_renderer.draw_lines(
            [
                f"Boids: {self.flock.num_boids}  |  FPS: {self.fps:.0f}{status}",
                f"Pointer: {pointer}  |  P: pause  R: re-seed  ESC: quit",
            ],
            10, 10, screen_size
        )

    def run(self):
        """Main application loop, one simulation pass per displayed frame."""
        while self.running:
            self.clock.tick(60)
            self.fps = self.clock.get_fps()

            self._handle_events()

            glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
            self._apply_camera()
            self.driver.step(pygame.time.get_ticks())
            self._render_hud()

            pygame.display.flip()

        logger.info("Shutting down after %d frames", self.driver.frames)
        pygame.quit()
