"""Input handling for pointer, keyboard and window events."""

import logging

import pygame
from pygame.locals import *

from flocking import PointerTarget
from .camera import Camera
from .driver import FrameDriver

logger = logging.getLogger(__name__)


class InputHandler:
    """Turns pygame events into pointer updates and driver commands."""

    def __init__(self, camera: Camera, pointer: PointerTarget, driver: FrameDriver):
        self.camera = camera
        self.pointer = pointer
        self.driver = driver
        self.resized = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            elif event.key == K_p:
                self.driver.toggle_pause()
            elif event.key == K_r:
                self.driver.reseed()
        elif event.type == MOUSEMOTION:
            self.handle_pointer(*event.pos)
        elif event.type == WINDOWLEAVE:
            self.pointer.deactivate()
        elif event.type == VIDEORESIZE:
            self.camera.resize(event.w, event.h)
            self.resized = True
            logger.debug("Viewport resized to %dx%d", self.camera.width, self.camera.height)

        return True

    def handle_pointer(self, x: float, y: float):
        """Unproject a mouse position onto the pointer plane and activate the pointer."""
        world = self.camera.unproject_to_plane(x, y)
        if world is not None:
            self.pointer.move_to(world)
